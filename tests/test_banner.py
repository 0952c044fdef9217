from itertools import islice

import pytest

from unixplay.banner import bounce_positions, diagonal_layout


def test_bounce_goes_right_then_back():
    values = list(islice(bounce_positions(10, 30), 42))
    assert values == list(range(10, 31)) + list(range(29, 9, -1)) + [11]


def test_bounce_stays_within_edges():
    values = list(islice(bounce_positions(3, 7), 200))
    assert min(values) == 3
    assert max(values) == 7
    assert all(abs(a - b) == 1 for a, b in zip(values, values[1:]))


@pytest.mark.parametrize("left, right", [(5, 5), (8, 2)])
def test_bounce_rejects_bad_edges(left, right):
    with pytest.raises(ValueError):
        next(bounce_positions(left, right))


def test_diagonal_layout_invariants():
    layout = diagonal_layout(24)
    assert [place.row for place in layout] == list(range(24))
    assert all(place.col == 2 * place.row for place in layout)
    assert all(place.standout == (place.row % 2 == 1) for place in layout)


def test_diagonal_layout_empty():
    assert diagonal_layout(0) == []


def test_diagonal_layout_rejects_negative():
    with pytest.raises(ValueError):
        diagonal_layout(-1)