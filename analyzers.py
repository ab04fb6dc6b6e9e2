import math
import re
from collections import Counter
from typing import NamedTuple

from rules import AMBIGUOUS_CHARS, KEYBOARD_WALKS

# ASCII classes only; Unicode letters count as symbols
_UPPER = re.compile(r'[A-Z]')
_LOWER = re.compile(r'[a-z]')
_DIGIT = re.compile(r'[0-9]')
_SYMBOL = re.compile(r'[^A-Za-z0-9]')

_ALL_DIGITS = re.compile(r'[0-9]+')
_ALL_ALPHA = re.compile(r'[A-Za-z]+')
_ALL_UPPER = re.compile(r'[A-Z]+')
_ALL_LOWER = re.compile(r'[a-z]+')

_YEAR = re.compile(r'(19|20)[0-9]{2}')
_CAMEL = re.compile(r'[A-Za-z]{3,}[A-Z][a-z]{2,}')
_ALPHA_CLUSTER = re.compile(r'[A-Za-z]{3,}')
_SAME_CASE_PAIR = re.compile(r'[A-Z]{2,}|[a-z]{2,}')
_WORD_BEFORE_DIGIT = re.compile(r'[A-Za-z]{4,}(?=[0-9])')
_WORD_SYMBOL_DIGIT = re.compile(r'[A-Za-z]{3,}[^A-Za-z0-9][0-9]')
_WORD_DIGITS = re.compile(r'[A-Za-z]{3,}[0-9]{2,}')
_ALPHA_SEGMENT = re.compile(r'[A-Za-z]{5,}')

WALK_WINDOW = 4


def shannon_entropy(password: str) -> float:
    if not password:
        return 0.0
    length = len(password)
    total = 0.0
    for count in Counter(password).values():
        p = count / length
        total -= p * math.log2(p)
    return total


def unique_char_ratio(password: str) -> float:
    if not password:
        return 0.0
    return len(set(password)) / len(password)


def _count_overlapping(haystack, needle):
    count = 0
    pos = haystack.find(needle)
    while pos != -1:
        count += 1
        pos = haystack.find(needle, pos + 1)
    return count


def repetition_score(password: str) -> float:
    """
    Share of the password covered by its most repeated chunk of 1-3 chars.

    Occurrences may overlap, so "aaaa" scores 1.0 and "ababab" scores 1.0
    through the chunk "ab" (3 hits x 2 chars / 6).
    """
    length = len(password)
    if length <= 1:
        return 1.0
    best = 0
    for size in (1, 2, 3):
        chunks = {password[i:i + size] for i in range(length - size + 1)}
        for chunk in chunks:
            best = max(best, _count_overlapping(password, chunk) * size)
    return min(best / length, 1.0)


def longest_run(password: str) -> int:
    if not password:
        return 0
    longest = current = 1
    for prev, char in zip(password, password[1:]):
        if char.lower() == prev.lower():
            current += 1
            longest = max(longest, current)
        else:
            current = 1
    return longest


def character_variety(password: str) -> int:
    return sum(1 for pattern in (_UPPER, _LOWER, _DIGIT, _SYMBOL) if pattern.search(password))


def has_keyboard_walk(password: str, walks=KEYBOARD_WALKS) -> bool:
    lowered = password.lower()
    for walk in walks:
        for i in range(len(walk) - WALK_WINDOW + 1):
            window = walk[i:i + WALK_WINDOW]
            if window in lowered or window[::-1] in lowered:
                return True
    return False


def _is_meaningful(word):
    return bool(_SAME_CASE_PAIR.search(word))


def _is_alternating_case(segment):
    return all(a.isupper() != b.isupper() for a, b in zip(segment, segment[1:]))


def has_human_structure(password: str) -> bool:
    """True when the password shows signs of being composed by a person."""
    if _YEAR.search(password):
        return True
    if _CAMEL.search(password):
        return True

    clusters = [c for c in _ALPHA_CLUSTER.findall(password) if _is_meaningful(c)]
    if len(clusters) >= 2:
        return True

    word = _WORD_BEFORE_DIGIT.search(password)
    if word and _is_meaningful(word.group()):
        return True

    if _WORD_SYMBOL_DIGIT.search(password) or _WORD_DIGITS.search(password):
        return True

    # Strict aBcDe alternation reads as generated, anything else as a word
    return any(not _is_alternating_case(seg) for seg in _ALPHA_SEGMENT.findall(password))


def has_ambiguous_chars(password: str) -> bool:
    return any(char in AMBIGUOUS_CHARS for char in password)


def is_all_digits(password: str) -> bool:
    return bool(_ALL_DIGITS.fullmatch(password))


def is_all_alpha(password: str) -> bool:
    return bool(_ALL_ALPHA.fullmatch(password))


def is_single_case_alpha(password: str) -> bool:
    return bool(_ALL_UPPER.fullmatch(password) or _ALL_LOWER.fullmatch(password))


class HeuristicProfile(NamedTuple):
    length: int
    entropy: float
    unique_ratio: float
    repetition: float
    longest_run: int
    variety: int
    keyboard_walk: bool
    human_structure: bool
    ambiguous: bool


def build_profile(password: str) -> HeuristicProfile:
    return HeuristicProfile(
        length=len(password),
        entropy=shannon_entropy(password),
        unique_ratio=unique_char_ratio(password),
        repetition=repetition_score(password),
        longest_run=longest_run(password),
        variety=character_variety(password),
        keyboard_walk=has_keyboard_walk(password),
        human_structure=has_human_structure(password),
        ambiguous=has_ambiguous_chars(password),
    )
