import pytest

from decomposition.dancing_links import DancingLinks


def test_columns_keep_insertion_order(knuth_matrix):
    m, cols = knuth_matrix
    assert [m.column_name(c) for c in m.columns()] == list("ABCDEFG")
    assert m.column_count == 7
    assert m.row_count == 6


def test_column_sizes_and_row_order(knuth_matrix):
    m, cols = knuth_matrix
    assert m.column_size(cols["A"]) == 2
    assert m.column_size(cols["D"]) == 3
    assert [m.label_of(n) for n in m.rows_of(cols["D"])] == ["r1", "r3", "r5"]
    assert [m.column_name(c) for c in m.row_columns(2)] == ["B", "C", "F"]


def test_choose_column_breaks_ties_by_creation_order(knuth_matrix):
    m, cols = knuth_matrix
    # A, B, C, E and F all have two rows
    assert m.choose_column() == cols["A"]


def test_cover_removes_conflicting_rows(knuth_matrix):
    m, cols = knuth_matrix
    m.cover(cols["A"])
    assert cols["A"] not in list(m.columns())
    # r1 and r3 are gone from D, only r5 is left
    assert [m.label_of(n) for n in m.rows_of(cols["D"])] == ["r5"]
    assert m.column_size(cols["D"]) == 1
    assert m.column_size(cols["G"]) == 2


def test_cover_uncover_restores_links(knuth_matrix):
    m, cols = knuth_matrix
    before = m.snapshot()
    m.cover(cols["A"])
    assert m.snapshot() != before
    m.uncover(cols["A"])
    assert m.snapshot() == before


def test_nested_cover_uncover_restores_links(knuth_matrix):
    m, cols = knuth_matrix
    before = m.snapshot()
    for name in "ADG":
        m.cover(cols[name])
    for name in "GDA":
        m.uncover(cols[name])
    assert m.snapshot() == before


def test_empty_matrix():
    m = DancingLinks()
    assert m.is_empty()
    assert m.choose_column() is None
    assert list(m.columns()) == []


def test_choose_column_prefers_empty_column():
    m = DancingLinks()
    a = m.add_column("a")
    b = m.add_column("b")
    m.add_row("x", [a])
    assert m.choose_column() == b
    assert m.column_size(b) == 0


def test_add_row_rejects_bad_columns():
    m = DancingLinks()
    a = m.add_column("a")
    with pytest.raises(ValueError):
        m.add_row("empty", [])
    with pytest.raises(ValueError):
        m.add_row("twice", [a, a])
    with pytest.raises(ValueError):
        m.add_row("unknown", [a, 999])
    assert m.row_count == 0
