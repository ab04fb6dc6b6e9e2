import math

import pytest

from analyzers import (
    build_profile,
    character_variety,
    has_ambiguous_chars,
    has_human_structure,
    has_keyboard_walk,
    longest_run,
    repetition_score,
    shannon_entropy,
    unique_char_ratio,
)


def test_entropy_of_empty_and_uniform_strings():
    assert shannon_entropy("") == 0.0
    assert shannon_entropy("aaaa") == 0.0


def test_entropy_matches_distribution():
    assert shannon_entropy("abcd") == pytest.approx(2.0)
    assert shannon_entropy("aabb") == pytest.approx(1.0)
    assert shannon_entropy("abcdefghi") == pytest.approx(math.log2(9))


def test_unique_char_ratio_is_case_sensitive():
    assert unique_char_ratio("abca") == pytest.approx(0.75)
    assert unique_char_ratio("aA") == pytest.approx(1.0)


def test_repetition_score_catches_runs_and_motifs():
    assert repetition_score("a") == 1.0
    assert repetition_score("aaaa") == 1.0
    assert repetition_score("ababab") == 1.0
    assert repetition_score("abcdefgh") == pytest.approx(3 / 8)


def test_repetition_score_counts_overlapping_hits():
    # "aa" appears three times in "aaaa" when overlaps count
    assert repetition_score("aaaab") == pytest.approx(1.0)


def test_longest_run_ignores_case():
    assert longest_run("aAab") == 3
    assert longest_run("abc") == 1
    assert longest_run("xx111112") == 5


def test_character_variety():
    assert character_variety("abc") == 1
    assert character_variety("ab12") == 2
    assert character_variety("aB1!") == 4
    # non-ASCII letters count as symbols
    assert character_variety("abcé") == 2


def test_keyboard_walk_forward_and_reversed():
    assert has_keyboard_walk("xxQWERxx")
    assert has_keyboard_walk("rewq!!99")
    assert has_keyboard_walk("my-qaz-wsx") is False
    assert has_keyboard_walk("myqazwsx")
    assert has_keyboard_walk("Sunset42!") is False


def test_keyboard_walk_needs_four_keys():
    assert has_keyboard_walk("qwe!asd!zxc") is False


@pytest.mark.parametrize("password", [
    "xx1987xx",       # year
    "myDogRex!",      # camel case
    "cat!!dog",       # two word clusters
    "Sunset42!",      # word then digits
    "Abc#4",          # word, symbol, digit
    "abc12",          # word then 2+ digits
    "hElloWORLD",     # segment that does not alternate case
])
def test_human_structure_detected(password):
    assert has_human_structure(password)


@pytest.mark.parametrize("password", [
    "aBcDeF",
    "x7#Kq2!Vm",
    "a2B!c3D@e4F#",
    "!!@@!!@@",
])
def test_human_structure_absent(password):
    assert has_human_structure(password) is False


def test_ambiguous_chars():
    assert has_ambiguous_chars("abc0")
    assert has_ambiguous_chars("pipe|")
    assert has_ambiguous_chars("abcd") is False


def test_profile_bundles_every_heuristic():
    profile = build_profile("Sunset42!")
    assert profile.length == 9
    assert profile.variety == 4
    assert profile.unique_ratio == pytest.approx(1.0)
    assert profile.longest_run == 1
    assert profile.human_structure is True
    assert profile.keyboard_walk is False
    assert profile.ambiguous is False
    assert profile.repetition == pytest.approx(3 / 9)
