import pytest

from algodrills.words import (
    can_construct,
    count_consistent_strings,
    count_of_atoms,
    count_seniors,
    decode_message,
    find_permutation_difference,
    is_anagram,
    kth_distinct,
    min_operations,
    minimum_pushes,
    uncommon_from_sentences,
    word_pattern,
)


def test_can_construct_source_example():
    assert can_construct("aa", "ab") is False


@pytest.mark.parametrize("text", ["", "a", "ransom", "abcabc"])
def test_can_construct_from_itself(text):
    assert can_construct(text, text) is True


def test_can_construct_needs_letter_present():
    assert can_construct("z", "abc") is False


def test_min_operations_source_example():
    assert min_operations(["./", "../", "./"]) == 0


def test_min_operations_down_and_back():
    assert min_operations(["a/", "b/", "../", "../"]) == min_operations([])


def test_min_operations_counts_depth():
    logs = ["a/", "b/", "c/"]
    assert min_operations(logs) == len(logs)


def test_count_consistent_strings_source_examples():
    assert count_consistent_strings("ab", ["ad", "bd", "aaab", "baa", "badab"]) == 2
    words = ["a", "b", "c", "ab", "ac", "bc", "abc", "abcd"]
    assert count_consistent_strings("abc", words) == 7


def test_kth_distinct_source_example():
    assert kth_distinct(["d", "b", "c", "b", "c", "a"], 2) == "a"


@pytest.mark.parametrize("k", [0, -1, 3])
def test_kth_distinct_out_of_range(k):
    assert kth_distinct(["d", "b", "c", "b", "c", "a"], k) == ""


def test_kth_distinct_first():
    assert kth_distinct(["d", "b", "c", "b", "c", "a"], 1) == "d"


def test_decode_message_source_example():
    key = "the quick brown fox jumps over the lazy dog"
    assert decode_message(key, "vkbs bs t suepuv") == "this is a secret"


def test_decode_message_identity_key():
    alphabet = "abcdefghijklmnopqrstuvwxyz"
    assert decode_message(alphabet, "hello world") == "hello world"


def test_is_anagram_source_examples():
    assert is_anagram("anagram", "nagaram") is True
    assert is_anagram("rat", "car") is False


def test_is_anagram_length_mismatch():
    assert is_anagram("ab", "abb") is False


def test_count_seniors_source_example():
    details = ["7868190130M7522", "5303914400F9211", "9273338290F4010"]
    assert count_seniors(details) == 2


def test_count_seniors_age_sixty_is_not_senior():
    assert count_seniors(["0000000000M6000"]) == 0


def test_word_pattern_source_example():
    assert word_pattern("abba", "dog cat cat dog") is True


def test_word_pattern_rejects_shared_word():
    assert word_pattern("abba", "dog dog dog dog") is False


def test_word_pattern_rejects_length_mismatch():
    assert word_pattern("ab", "dog cat fish") is False


def test_minimum_pushes_source_example():
    assert minimum_pushes("hiknogatpyjzcdbe") == 24


def test_minimum_pushes_short_word():
    word = "abcdefgh"
    assert minimum_pushes(word) == len(word)


def test_minimum_pushes_at_least_length():
    word = "aabbccddeeffgghhiijjkkllmm"
    assert minimum_pushes(word) >= len(word)


def test_find_permutation_difference_source_example():
    assert find_permutation_difference("abc", "bac") == 2


def test_find_permutation_difference_identical():
    assert find_permutation_difference("xyz", "xyz") == 0


def test_uncommon_from_sentences_source_examples():
    result = uncommon_from_sentences("apple banana orange", "banana grape apple")
    assert sorted(result) == ["grape", "orange"]
    result = uncommon_from_sentences("the quick brown fox", "the slow brown dog")
    assert sorted(result) == ["dog", "fox", "quick", "slow"]


def test_uncommon_from_sentences_ignores_extra_spaces():
    assert uncommon_from_sentences("  a  ", "a b") == ["b"]


def test_count_of_atoms_source_example():
    assert count_of_atoms("K4(ON(SO3)2)2") == "K4N2O14S4"


def test_count_of_atoms_water():
    assert count_of_atoms("H2O") == "H2O"


def test_count_of_atoms_nested_group():
    assert count_of_atoms("Mg(OH)2") == "H2MgO2"


@pytest.mark.parametrize("formula", ["H2O)", "(H2O", "((H)"])
def test_count_of_atoms_unbalanced(formula):
    with pytest.raises(ValueError):
        count_of_atoms(formula)