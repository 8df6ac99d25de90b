"""
Wordle-style feedback for a single (guess, target) pair.

Conventions:
  - 0 : gray   = letter not present (or present fewer times than guessed)
  - 1 : yellow = correct letter in the wrong position
  - 2 : green  = correct letter in the correct position

A pattern is a tuple of those digits. For bucketing it is encoded as a base-3
integer with the leftmost position as the most significant digit, so every
5-letter pattern lands in [0, 242] and all-green is 242.

Algorithm (two-pass, canonical for Wordle):
  1) Count every letter of the target.
  2) First pass marks greens and consumes one count per green.
  3) Second pass marks yellows only while the letter still has a count left.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, Tuple

from .errors import InvalidFeedbackError

WORD_LENGTH = 5

GRAY, YELLOW, GREEN = 0, 1, 2

NUM_PATTERNS = 3 ** WORD_LENGTH
SOLVED_CODE = NUM_PATTERNS - 1

Pattern = Tuple[int, ...]

# Letter aliases accepted from humans, alongside the digits themselves.
_SYMBOLS = {
    "0": GRAY, "-": GRAY, ".": GRAY, "b": GRAY, "x": GRAY,
    "1": YELLOW, "y": YELLOW,
    "2": GREEN, "g": GREEN,
}
_SEPARATORS = re.compile(r"[\s,]+")


def compute_feedback(guess: str, target: str) -> Pattern:
    """
    Compute the feedback pattern for `guess` against `target`.

    Examples:
      compute_feedback("apple", "angle") -> (2, 0, 0, 2, 2)
      compute_feedback("belle", "level") -> (0, 2, 1, 1, 1)
    """
    assert len(guess) == len(target), "Guess and target must be the same length"

    remaining = Counter(target)
    pattern = [GRAY] * len(guess)

    # Pass 1: greens first, so they are never starved by an earlier yellow.
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            pattern[i] = GREEN
            remaining[g] -= 1

    # Pass 2: yellows only while unmatched copies of the letter remain.
    for i, g in enumerate(guess):
        if pattern[i] == GREEN:
            continue
        if remaining[g] > 0:
            pattern[i] = YELLOW
            remaining[g] -= 1

    return tuple(pattern)


def encode_pattern(pattern: Iterable[int]) -> int:
    code = 0
    for digit in pattern:
        code = code * 3 + digit
    return code


def decode_pattern(code: int, length: int = WORD_LENGTH) -> Pattern:
    if not 0 <= code < 3 ** length:
        raise InvalidFeedbackError(f"pattern code {code} out of range for length {length}")
    digits = []
    for _ in range(length):
        code, digit = divmod(code, 3)
        digits.append(digit)
    return tuple(reversed(digits))


def feedback_code(guess: str, target: str) -> int:
    """Integer bucket of compute_feedback(guess, target)."""
    return encode_pattern(compute_feedback(guess, target))


def is_solved(pattern: Iterable[int]) -> bool:
    """True iff every digit is green."""
    return all(d == GREEN for d in pattern)


def validate_pattern(pattern: Iterable[int], length: int = WORD_LENGTH) -> Pattern:
    """
    Return `pattern` as a tuple after checking its length and digit range.
    Raises InvalidFeedbackError otherwise.
    """
    digits = tuple(pattern)
    if len(digits) != length:
        raise InvalidFeedbackError(f"expected {length} feedback digits, got {len(digits)}")
    for d in digits:
        if isinstance(d, bool) or not isinstance(d, int) or d not in (GRAY, YELLOW, GREEN):
            raise InvalidFeedbackError(f"feedback digit {d!r} is not one of 0, 1, 2")
    return digits


def parse_pattern(text: str, length: int = WORD_LENGTH) -> Pattern:
    """
    Parse human feedback such as "20012", "2 0 0 1 2", "2,0,0,1,2" or "G--YG".

    Raises:
      InvalidFeedbackError on unknown symbols or the wrong length.
    """
    compact = _SEPARATORS.sub("", text.strip().lower())
    digits = []
    for ch in compact:
        if ch not in _SYMBOLS:
            raise InvalidFeedbackError(f"unknown feedback symbol {ch!r} (use 0/1/2)")
        digits.append(_SYMBOLS[ch])
    return validate_pattern(digits, length)


def format_pattern(pattern: Iterable[int]) -> str:
    """(2, 0, 0, 1, 2) -> "20012"."""
    return "".join(str(d) for d in pattern)
