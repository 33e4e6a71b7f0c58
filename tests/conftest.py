import logging

import pytest

from decomposition.dancing_links import DancingLinks


def pytest_configure(config):
    """Set up test environment before tests run."""
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@pytest.fixture
def knuth_matrix():
    """
    The 7-column example from Knuth's Dancing Links paper.
    Its only exact cover is rows r0, r3 and r4.
    """
    m = DancingLinks()
    cols = {name: m.add_column(name) for name in "ABCDEFG"}
    rows = [
        ("r0", "CEF"),
        ("r1", "ADG"),
        ("r2", "BCF"),
        ("r3", "AD"),
        ("r4", "BG"),
        ("r5", "DEG"),
    ]
    for label, names in rows:
        m.add_row(label, [cols[n] for n in names])
    return m, cols
