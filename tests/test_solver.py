import pytest

from decomposition.encoder import encode
from decomposition.solver import SearchState, Solver


def test_finds_knuth_cover(knuth_matrix):
    m, _ = knuth_matrix
    solver = Solver(m)
    assert solver.solve_one() == ["r3", "r0", "r4"]
    assert solver.state is SearchState.SOLVED
    assert solver.stats.solutions == 1
    assert solver.stats.backtracks >= 1


def test_matrix_restored_after_solve(knuth_matrix):
    m, _ = knuth_matrix
    before = m.snapshot()
    Solver(m).solve_one()
    assert m.snapshot() == before


def test_same_matrix_solves_the_same_way_twice(knuth_matrix):
    m, _ = knuth_matrix
    first = Solver(m).solve_one()
    second = Solver(m).solve_one()
    assert first == second


def test_count_is_bounded_by_max_solutions(knuth_matrix):
    m, _ = knuth_matrix
    solver = Solver(m, max_solutions=5)
    assert solver.solve_count() == 1
    assert solver.state is SearchState.SOLVED


def test_exhausted_search():
    m = encode(9, 4)
    before = m.snapshot()
    solver = Solver(m)
    assert solver.solve_one() is None
    assert solver.state is SearchState.EXHAUSTED
    assert m.snapshot() == before


def test_empty_matrix_is_solved_by_nothing():
    m = encode(4, 4, [[1, 2, 3, 4]])
    assert m.column_count == 0
    solver = Solver(m)
    assert solver.solve_one() == []
    assert solver.state is SearchState.SOLVED


def test_counts_several_solutions():
    # 30 labelled Fano planes on 7 points
    solver = Solver(encode(7, 3), max_solutions=3)
    assert solver.solve_count() == 3
    assert solver.state is SearchState.SOLVED


def test_cancelled_before_start(knuth_matrix):
    m, _ = knuth_matrix
    solver = Solver(m, should_stop=lambda: True)
    assert solver.solve_one() is None
    assert solver.state is SearchState.CANCELLED
    assert solver.stats.nodes == 0


def test_cancelled_mid_search_restores_matrix():
    m = encode(9, 4)
    before = m.snapshot()
    calls = []

    def stop():
        calls.append(1)
        return len(calls) > 20

    solver = Solver(m, should_stop=stop)
    assert solver.solve_one() is None
    assert solver.state is SearchState.CANCELLED
    assert solver.stats.nodes == 20
    assert m.snapshot() == before


def test_zero_time_limit_cancels():
    solver = Solver(encode(9, 4), time_limit=0)
    assert solver.solve_one() is None
    assert solver.state is SearchState.CANCELLED


def test_second_run_reuses_outcome(knuth_matrix):
    m, _ = knuth_matrix
    solver = Solver(m)
    solver.solve_one()
    nodes = solver.stats.nodes
    assert solver.solve_one() == ["r3", "r0", "r4"]
    assert solver.stats.nodes == nodes


def test_max_solutions_must_be_positive(knuth_matrix):
    m, _ = knuth_matrix
    with pytest.raises(ValueError):
        Solver(m, max_solutions=0)
