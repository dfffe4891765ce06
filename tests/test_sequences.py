import pytest

from algodrills.sequences import (
    array_rank_transform,
    build_array,
    can_be_equal,
    create_target_array,
    decode,
    intersect,
    min_max_game,
    rotate,
    search,
    sort_array,
    sort_people,
    three_sum,
    two_sum,
)


def test_rotate_by_one_moves_last_to_front():
    original = [1, 2, 3, 4, 5, 6, 7]
    nums = list(original)
    rotate(nums, 1)
    assert nums[0] == original[-1]
    assert nums[1:] == original[:-1]


def test_rotate_back_restores_original():
    original = [1, 2, 3, 4, 5, 6, 7]
    nums = list(original)
    rotate(nums, 3)
    assert nums != original
    rotate(nums, len(original) - 3)
    assert nums == original


def test_rotate_wraps_large_k():
    a = [1, 2, 3, 4, 5]
    b = list(a)
    rotate(a, 2)
    rotate(b, 2 + 3 * len(b))
    assert a == b


def test_rotate_by_length_is_identity():
    nums = [4, 5, 6]
    rotate(nums, 3)
    assert nums == [4, 5, 6]


def test_two_sum_source_example():
    nums = [3, 2, 4, 7, 9]
    i, j = two_sum(nums, 9)
    assert i != j
    assert nums[i] + nums[j] == 9
    assert nums[i] <= nums[j]


def test_two_sum_equal_values():
    nums = [3, 3]
    assert sorted(two_sum(nums, 6)) == [0, 1]


def test_two_sum_not_found():
    assert two_sum([1, 2, 3], 100) == [-1, -1]


def test_three_sum_source_example():
    assert three_sum([-1, 0, 1, 2, -1, -4]) == [[-1, -1, 2], [-1, 0, 1]]


def test_three_sum_invariants_and_no_mutation():
    nums = [0, 0, 0, 0, 3, -3, 1, -1, 2, -2]
    before = list(nums)
    triplets = three_sum(nums)
    assert nums == before
    assert triplets
    for triplet in triplets:
        assert sum(triplet) == 0
        assert triplet == sorted(triplet)
    assert len({tuple(t) for t in triplets}) == len(triplets)


def test_create_target_array_in_order():
    assert create_target_array([5, 6, 7], [0, 1, 2]) == [5, 6, 7]


def test_create_target_array_always_front():
    assert create_target_array([5, 6, 7], [0, 0, 0]) == [7, 6, 5]


def test_create_target_array_length_mismatch():
    with pytest.raises(ValueError):
        create_target_array([1, 2], [0])


def test_decode_round_trip():
    original = [4, 2, 0, 7, 4]
    encoded = [a ^ b for a, b in zip(original, original[1:])]
    assert decode(encoded, original[0]) == original


def test_decode_empty():
    assert decode([], 5) == [5]


def test_build_array_identity():
    assert build_array([0, 1, 2, 3]) == [0, 1, 2, 3]


def test_build_array_three_cycle_twice_returns_cycle():
    cycle = [1, 2, 0]
    assert build_array(build_array(cycle)) == cycle


def test_min_max_game_single():
    assert min_max_game([9]) == 9


def test_min_max_game_pair_takes_min():
    assert min_max_game([3, 1]) == 1


def test_min_max_game_four():
    assert min_max_game([1, 5, 2, 9]) == 1


def test_min_max_game_empty():
    with pytest.raises(ValueError):
        min_max_game([])


def test_search_source_cases():
    assert search([-10, -3, 0, 5, 9], 5) == 3
    assert search([1, 2, 3, 4, 5, 6, 7], 8) == -1


def test_search_finds_every_element():
    nums = [-4, -1, 0, 3, 8, 12]
    for index, value in enumerate(nums):
        assert search(nums, value) == index


def test_sort_array_in_place():
    nums = [4, 2, 3, 5, 1]
    result = sort_array(nums)
    assert result is nums
    assert nums == sorted([4, 2, 3, 5, 1])


def test_sort_array_with_duplicates_and_negatives():
    data = [5, -1, 5, 0, -7, 3, 3, 2]
    assert sort_array(list(data)) == sorted(data)


def test_intersect_source_example():
    assert intersect([1, 2, 2, 1], [2, 2]) == [2, 2]


def test_intersect_respects_multiplicity():
    assert intersect([4, 9, 5], [9, 4, 9, 8, 4]) == [4, 9]


def test_can_be_equal_source_cases():
    assert can_be_equal([1, 2, 3, 4], [2, 4, 1, 3]) is True
    assert can_be_equal([1, 2, 3, 5], [2, 4, 1, 3]) is False


def test_array_rank_transform_invariants():
    arr = [40, 10, 20, 30, 20, 10, 50]
    ranks = array_rank_transform(arr)
    assert min(ranks) == 1
    assert max(ranks) == len(set(arr))
    for (a, ra) in zip(arr, ranks):
        for (b, rb) in zip(arr, ranks):
            assert (a < b) == (ra < rb)
            assert (a == b) == (ra == rb)


def test_array_rank_transform_empty():
    assert array_rank_transform([]) == []


def test_sort_people_source_cases():
    assert sort_people(["Alice", "Bob", "Charlie"], [155, 180, 165]) == [
        "Bob",
        "Charlie",
        "Alice",
    ]
    assert sort_people(["Tom", "Jerry", "Spike"], [150, 120, 180]) == [
        "Spike",
        "Tom",
        "Jerry",
    ]


def test_sort_people_length_mismatch():
    with pytest.raises(ValueError):
        sort_people(["Alice"], [150, 160])