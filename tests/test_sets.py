"""Tests for the set-rank table."""
from scout.sets import MAX_SET_SIZE, build_set_map, default_set_map, set_rank


def test_three_of_a_kind_beats_pair():
    m = default_set_map()
    assert set_rank(m, [3, 3, 3]) > set_rank(m, [9, 9])


def test_flush_beats_straight_of_same_size():
    m = default_set_map()
    for size in range(2, MAX_SET_SIZE + 1):
        best_straight = set_rank(m, range(10 - size, 10))
        worst_flush = set_rank(m, [0] * size)
        assert worst_flush > best_straight


def test_larger_set_beats_smaller():
    m = default_set_map()
    assert set_rank(m, [0, 1, 2]) > set_rank(m, [9, 9])
    assert set_rank(m, [0, 1]) > set_rank(m, [9])


def test_straight_and_reverse_share_rank():
    m = default_set_map()
    assert set_rank(m, [2, 3, 4]) == set_rank(m, [4, 3, 2])
    assert set_rank(m, [5, 6]) == set_rank(m, [6, 5])


def test_higher_values_rank_higher_within_shape():
    m = default_set_map()
    assert set_rank(m, [9]) > set_rank(m, [0])
    assert set_rank(m, [4, 5, 6]) > set_rank(m, [3, 4, 5])
    assert set_rank(m, [7, 7]) > set_rank(m, [6, 6])


def test_singles_are_the_weakest_sets():
    m = default_set_map()
    singles = [set_rank(m, [v]) for v in range(10)]
    others = [rank for key, rank in m.items() if len(key) > 1]
    assert min(singles) == 1
    assert max(singles) < min(others)
    assert len(set(singles)) == 10


def test_unranked_shapes():
    m = default_set_map()
    assert set_rank(m, []) == 0
    assert set_rank(m, [1, 3]) == 0
    assert set_rank(m, [1, 2, 1]) == 0
    assert set_rank(m, range(10)) == 0


def test_table_is_deterministic_and_read_only():
    a = build_set_map()
    assert dict(a) == dict(build_set_map())
    assert default_set_map() is default_set_map()
    try:
        a[(0,)] = 99  # type: ignore[index]
    except TypeError:
        pass
    else:
        raise AssertionError("set map should be read-only")
