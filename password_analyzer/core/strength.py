"""
Password strength scoring for the Password Analyzer.

This module scores a password with a small rule set (length, character
variety, repetition and sequence penalties) and derives a charset-based
entropy figure that the crack-time estimator consumes.
"""

import math
import re
from typing import Dict, List, NamedTuple, Tuple

from password_analyzer.utils.logger import get_logger

logger = get_logger(__name__)


# Matched case-insensitively, before any other rule
COMMON_PASSWORDS = frozenset([
    "password",
    "123456",
    "qwerty",
    "admin",
    "welcome",
    "123456789",
    "12345678",
    "abc123",
    "football",
    "monkey",
    "letmein",
    "dragon",
    "baseball",
    "sunshine",
    "princess",
    "password123",
    "qwerty123",
    "admin123",
    "iloveyou",
    "1234567890",
])

MIN_LENGTH = 8

# Alphabet sizes per character class
LOWERCASE_SIZE = 26
UPPERCASE_SIZE = 26
DIGIT_SIZE = 10
SYMBOL_SIZE = 33

COMMON_PASSWORD_FEEDBACK = "This is a commonly used password"
TOO_SHORT_FEEDBACK = f"Password is too short (minimum {MIN_LENGTH} characters)"
REPEATED_FEEDBACK = "Avoid repeated characters (e.g., 'aaa')"
SEQUENTIAL_FEEDBACK = "Avoid sequential patterns (e.g., '123', 'abc')"
MISSING_LOWERCASE_FEEDBACK = "Add lowercase letters (a-z)"
MISSING_UPPERCASE_FEEDBACK = "Add uppercase letters (A-Z)"
MISSING_NUMBERS_FEEDBACK = "Add numbers (0-9)"
MISSING_SYMBOLS_FEEDBACK = "Add special characters (e.g., !@#$%)"

STRENGTH_LABELS = ("Very Weak", "Weak", "Strong", "Very Strong")

_LOWERCASE_RE = re.compile(r"[a-z]")
_UPPERCASE_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SYMBOL_RE = re.compile(r"[^A-Za-z0-9]")
_REPEATED_RE = re.compile(r"(.)\1{2,}")

_DIGITS = "0123456789"
_LETTERS = "abcdefghijklmnopqrstuvwxyz"
_DIGIT_RUNS = tuple(_DIGITS[i:i + 3] for i in range(len(_DIGITS) - 2))
_LETTER_RUNS = tuple(_LETTERS[i:i + 3] for i in range(len(_LETTERS) - 2))
_SEQUENTIAL_RE = re.compile(
    "|".join(_DIGIT_RUNS + _LETTER_RUNS), re.IGNORECASE | re.ASCII
)


class StrengthResult(NamedTuple):
    """Outcome of scoring a single password"""

    score: int
    entropy: float
    feedback: Tuple[str, ...]

    @property
    def label(self) -> str:
        return strength_label(self.score)

    @property
    def percentage(self) -> int:
        return strength_percentage(self.score)

    def to_dict(self) -> Dict[str, object]:
        """Return the result as a JSON-friendly dictionary"""
        return {
            "score": self.score,
            "entropy": self.entropy,
            "feedback": list(self.feedback),
        }


def character_classes(password: str) -> Dict[str, bool]:
    """Report which character classes appear in a password

    Also reports ``long_enough`` (12+ characters), which is the length
    requirement the interactive checklist shows.
    """
    return {
        "lowercase": bool(_LOWERCASE_RE.search(password)),
        "uppercase": bool(_UPPERCASE_RE.search(password)),
        "numbers": bool(_DIGIT_RE.search(password)),
        "symbols": bool(_SYMBOL_RE.search(password)),
        "long_enough": len(password) >= 12,
    }


def charset_size(password: str) -> int:
    """Sum of the alphabet sizes of the classes present, floored at 1"""
    classes = character_classes(password)
    size = 0
    if classes["lowercase"]:
        size += LOWERCASE_SIZE
    if classes["uppercase"]:
        size += UPPERCASE_SIZE
    if classes["numbers"]:
        size += DIGIT_SIZE
    if classes["symbols"]:
        size += SYMBOL_SIZE
    return max(size, 1)


def calculate_entropy(password: str) -> float:
    """Search-space entropy in bits: length * log2(charset size)"""
    return len(password) * math.log2(charset_size(password))


def has_repeated_characters(password: str) -> bool:
    """True if any character occurs three or more times in a row"""
    return _REPEATED_RE.search(password) is not None


def has_sequential_pattern(password: str) -> bool:
    """True if the password contains an ascending digit or letter triple"""
    return _SEQUENTIAL_RE.search(password) is not None


def calculate_password_strength(password: str) -> StrengthResult:
    """Score a password and explain the score

    Args:
        password: Candidate password, used as-is

    Returns:
        StrengthResult with the score, the entropy in bits and feedback
        messages ordered length, repetition, sequence, missing classes
    """
    if password.lower() in COMMON_PASSWORDS:
        logger.debug("Candidate matched the common password list")
        return StrengthResult(0, 0.0, (COMMON_PASSWORD_FEEDBACK,))

    feedback: List[str] = []
    score = 0

    length = len(password)
    if length < MIN_LENGTH:
        feedback.append(TOO_SHORT_FEEDBACK)
    else:
        score += 1
    if length >= 12:
        score += 1
    if length >= 16:
        score += 1

    classes = character_classes(password)
    variety = sum(
        1 for name in ("lowercase", "uppercase", "numbers", "symbols")
        if classes[name]
    )
    score += min(variety, 3)

    if has_repeated_characters(password):
        score = max(0, score - 1)
        feedback.append(REPEATED_FEEDBACK)

    if has_sequential_pattern(password):
        score = max(0, score - 1)
        feedback.append(SEQUENTIAL_FEEDBACK)

    if not classes["lowercase"]:
        feedback.append(MISSING_LOWERCASE_FEEDBACK)
    if not classes["uppercase"]:
        feedback.append(MISSING_UPPERCASE_FEEDBACK)
    if not classes["numbers"]:
        feedback.append(MISSING_NUMBERS_FEEDBACK)
    if not classes["symbols"]:
        feedback.append(MISSING_SYMBOLS_FEEDBACK)

    entropy = calculate_entropy(password)
    logger.debug(f"Scored candidate of length {length}: score={score}, entropy={entropy:.2f}")

    return StrengthResult(score, entropy, tuple(feedback))


def strength_percentage(score: int) -> int:
    """Meter fill for a score, 25 points per step, capped at 100"""
    return max(0, min(score * 25, 100))


def strength_label(score: int) -> str:
    """Human-readable strength label for a score"""
    percentage = strength_percentage(score)
    if percentage <= 25:
        return STRENGTH_LABELS[0]
    if percentage <= 50:
        return STRENGTH_LABELS[1]
    if percentage <= 75:
        return STRENGTH_LABELS[2]
    return STRENGTH_LABELS[3]
