"""
Password evaluation engines.

Two independent policies share the analyzers in ``analyzers``:

* empathy - hard rejections first, then a soft score that must reach
  ``EMPATHY_PASS_SCORE``. The verdict is binary; the numeric score is only a
  display value.
* strict - additive rubric over length and character variety, mapped to a
  Weak/Moderate/Strong label.

``evaluate`` picks one and always returns the same flat dict shape.
"""
import logging

from analyzers import (
    build_profile,
    character_variety,
    has_keyboard_walk,
    is_all_alpha,
    is_all_digits,
    is_single_case_alpha,
)
from rules import COMMON_PASSWORDS

logger = logging.getLogger(__name__)

EMPATHY = "empathy"
STRICT = "strict"

MIN_LENGTH = 8
MAX_LENGTH = 64
EMPATHY_PASS_SCORE = 5
EMPATHY_VALID_SCORE = 85
EMPATHY_INVALID_SCORE = 25

STRONG = "Strong"
MODERATE = "Moderate"
WEAK = "Weak"


def _result(score, strength, issues, positives, is_valid):
    return {
        'score': score,
        'strength': strength,
        'issues': issues,
        'positives': positives,
        'isValid': is_valid,
    }


def _empty_result():
    return _result(0, WEAK, ["Password is required"], [], False)


# ---------------------------------------------------------------------------
# Empathy mode
# ---------------------------------------------------------------------------

def empathy_rejection(password, blocklist=COMMON_PASSWORDS, profile=None):
    """Return the name of the first hard rule the password breaks, or None."""
    if len(password) < MIN_LENGTH:
        return "too_short"
    if len(password) > MAX_LENGTH:
        return "too_long"
    if password.lower() in blocklist:
        return "common_password"
    if len(set(password.lower())) == 1:
        return "single_character"
    if is_all_digits(password):
        return "all_digits"
    if is_all_alpha(password):
        return "all_letters"

    if profile is None:
        profile = build_profile(password)
    if profile.keyboard_walk:
        return "keyboard_walk"
    if profile.longest_run >= 5:
        return "long_run"
    if profile.unique_ratio >= 0.95 and not profile.human_structure:
        return "machine_generated"
    if profile.variety < 2:
        return "low_variety"
    if profile.entropy < 2.0:
        return "low_entropy"
    if profile.entropy > 4.8 and profile.unique_ratio > 0.80 and not profile.human_structure:
        return "too_random"
    if profile.repetition > 0.75:
        return "repetitive"
    return None


def empathy_soft_score(password, profile=None):
    if profile is None:
        profile = build_profile(password)
    score = 0

    if profile.length >= 10:
        score += 1
    if profile.length >= 12:
        score += 1

    score += profile.variety - 1

    if 2.5 <= profile.entropy <= 4.8:
        score += 2
    if 0.4 <= profile.unique_ratio <= 0.85:
        score += 1
    if profile.repetition < 0.5:
        score += 1
    if profile.ambiguous:
        score -= 1
    if profile.human_structure:
        score += 2
    if is_single_case_alpha(password):
        score -= 1
    return score


def is_valid_password(password, blocklist=COMMON_PASSWORDS):
    # Oversized input is rejected on length alone, never analyzed
    profile = build_profile(password) if len(password) <= MAX_LENGTH else None
    reason = empathy_rejection(password, blocklist, profile)
    if reason:
        logger.debug("empathy: hard rejection (%s)", reason)
        return False
    score = empathy_soft_score(password, profile)
    logger.debug("empathy: soft score %d (needs %d)", score, EMPATHY_PASS_SCORE)
    return score >= EMPATHY_PASS_SCORE


def evaluate_empathy(password, blocklist=COMMON_PASSWORDS):
    if not password:
        return _empty_result()

    if is_valid_password(password, blocklist):
        return _result(
            EMPATHY_VALID_SCORE, STRONG, [],
            ["Meets all empathy encryption principles",
             "Good intentional structure and balance"],
            True,
        )
    return _result(
        EMPATHY_INVALID_SCORE, WEAK,
        ["Does not meet empathy encryption requirements"], [],
        False,
    )


# ---------------------------------------------------------------------------
# Strict mode
# ---------------------------------------------------------------------------

def strength_label(score):
    if score >= 80:
        return STRONG
    if score >= 60:
        return MODERATE
    return WEAK


def evaluate_strict(password, blocklist=COMMON_PASSWORDS):
    if not password:
        return _empty_result()

    score = 0
    issues = []
    positives = []
    is_valid = True

    if len(password) < MIN_LENGTH:
        issues.append(f"Password must be at least {MIN_LENGTH} characters long")
        is_valid = False
    else:
        score += 20
        positives.append("Good minimum length")
    if len(password) >= 12:
        score += 20
        positives.append("Excellent length")

    variety = character_variety(password)
    if variety < 2:
        issues.append("Password must contain at least 2 of: lowercase, uppercase, digits, special characters")
        is_valid = False
    else:
        score += variety * 15
        positives.append(f"Character variety ({variety} types)")

    if password.lower() in blocklist:
        issues.append("Password is too common")
        is_valid = False
        score = 0

    # Penalty only; empathy mode rejects outright
    if has_keyboard_walk(password):
        score -= 15
        issues.append("Contains keyboard patterns")

    score = max(0, min(100, score))
    logger.debug("strict: score %d, valid=%s", score, is_valid)
    return _result(score, strength_label(score), issues, positives, is_valid)


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

def normalize_mode(mode):
    if mode == STRICT:
        return STRICT
    return EMPATHY


def evaluate(password, mode=EMPATHY, blocklist=None):
    """
    Evaluate ``password`` under ``mode`` ("empathy" by default, "strict").

    Unknown modes fall back to empathy. Returns a dict with ``score``,
    ``strength``, ``issues``, ``positives`` and ``isValid``.
    """
    if not isinstance(password, str):
        raise TypeError(f"password must be str, not {type(password).__name__}")
    if blocklist is None:
        blocklist = COMMON_PASSWORDS

    if normalize_mode(mode) == STRICT:
        return evaluate_strict(password, blocklist)
    return evaluate_empathy(password, blocklist)
