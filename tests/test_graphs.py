import pytest

from daily_algorithms.graphs import (
    DisjointSet,
    max_stability,
    min_cost_with_reversals,
    minimum_char_conversion_cost,
    minimum_substring_conversion_cost,
)


def test_disjoint_set_union_and_find():
    size = 5
    sets = DisjointSet(size)
    assert sets.count == size
    assert sets.union(0, 1) is True
    assert sets.union(1, 0) is False
    assert sets.find(0) == sets.find(1)
    assert sets.count == size - 1


def test_disjoint_set_transitive_join():
    sets = DisjointSet(4)
    sets.union(0, 1)
    sets.union(2, 3)
    assert sets.find(0) != sets.find(2)
    sets.union(1, 3)
    assert len({sets.find(i) for i in range(4)}) == 1
    assert sets.count == 1


def test_max_stability_single_must_edge():
    assert max_stability(2, [[0, 1, 5, 1]], 0) == 5


def test_max_stability_upgrade_doubles_strength():
    strength = 5
    assert max_stability(2, [[0, 1, strength, 0]], 1) == strength * 2
    assert max_stability(2, [[0, 1, strength, 0]], 0) == strength


def test_max_stability_path_takes_weakest_edge():
    assert max_stability(3, [[0, 1, 4, 0], [1, 2, 3, 0]], 0) == 3


def test_max_stability_must_edge_with_upgrade():
    assert max_stability(3, [[0, 1, 2, 1], [1, 2, 3, 0]], 1) == 2


def test_max_stability_must_cycle_is_impossible():
    assert max_stability(3, [[0, 1, 1, 1], [1, 2, 1, 1], [2, 0, 1, 1]], 0) == -1


def test_max_stability_disconnected_is_impossible():
    assert max_stability(3, [[0, 1, 4, 0]], 3) == -1


def test_reversals_single_node():
    assert min_cost_with_reversals(1, []) == 0


def test_reversals_forward_edge():
    assert min_cost_with_reversals(2, [[0, 1, 7]]) == 7


def test_reversals_backward_edge_costs_double():
    weight = 7
    assert min_cost_with_reversals(2, [[1, 0, weight]]) == 2 * weight


def test_reversals_unreachable():
    assert min_cost_with_reversals(3, [[0, 1, 1]]) == -1


def test_reversals_worked_example():
    assert min_cost_with_reversals(4, [[0, 1, 3], [3, 1, 1], [2, 3, 4], [0, 2, 2]]) == 5


def test_reversals_never_more_than_direct_route():
    edges = [[0, 2, 1], [2, 1, 1], [1, 3, 1], [2, 3, 3]]
    assert min_cost_with_reversals(4, edges) <= 1 + 3


def test_char_conversion_identical_strings():
    assert minimum_char_conversion_cost("abc", "abc", [], [], []) == 0


def test_char_conversion_chain():
    assert minimum_char_conversion_cost("a", "c", ["a", "b"], ["b", "c"], [2, 4]) == 2 + 4


def test_char_conversion_prefers_cheaper_duplicate():
    assert minimum_char_conversion_cost("a", "b", ["a", "a"], ["b", "b"], [9, 3]) == 3


def test_char_conversion_impossible():
    assert minimum_char_conversion_cost("a", "b", ["b"], ["a"], [1]) == -1


def test_char_conversion_worked_example():
    result = minimum_char_conversion_cost(
        "abcd", "acbe", ["a", "b", "c", "c", "e", "d"], ["b", "c", "b", "e", "b", "e"],
        [2, 5, 5, 1, 2, 20],
    )
    assert result == 28


def test_char_conversion_length_mismatch():
    with pytest.raises(ValueError):
        minimum_char_conversion_cost("ab", "a", [], [], [])


def test_substring_matches_char_version_for_letters():
    args = (
        "abcd", "acbe", ["a", "b", "c", "c", "e", "d"], ["b", "c", "b", "e", "b", "e"],
        [2, 5, 5, 1, 2, 20],
    )
    assert minimum_substring_conversion_cost(*args) == minimum_char_conversion_cost(*args)


def test_substring_whole_word():
    assert minimum_substring_conversion_cost("abcd", "acbe", ["abcd"], ["acbe"], [7]) == 7


def test_substring_worked_example():
    result = minimum_substring_conversion_cost(
        "abcdefgh", "acdeeghh", ["bcd", "fgh", "thh"], ["cde", "thh", "ghh"], [1, 3, 5]
    )
    assert result == 9


def test_substring_impossible():
    assert minimum_substring_conversion_cost("abc", "xyz", ["ab"], ["xy"], [1]) == -1


def test_substring_length_mismatch():
    with pytest.raises(ValueError):
        minimum_substring_conversion_cost("abc", "ab", [], [], [])