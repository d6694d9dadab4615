"""
Fibonacci Sequence
==================
Generation of the sequence and the small formatting helpers used by the
sequence table.

Functions:
    generate_fibonacci: The first n terms (1, 1, 2, 3, 5, ...).
    to_binary: Base-2 representation of a term.
    sequence_rows: Table rows (index, value, binary).
    parse_term_count: Boundary validation of the user-supplied term count.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from fibonaccispiral.config import MIN_TERMS, MAX_TERMS

logger = logging.getLogger(__name__)

# Leading integer, same leniency as a typical form field parse ("12abc" -> 12)
_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


class TermCountError(ValueError):
    """Raised when the requested number of terms is outside the accepted range."""

    def __init__(self, message: str, suggested: Optional[int] = None) -> None:
        super().__init__(message)
        self.suggested = suggested


def generate_fibonacci(n: int) -> list[int]:
    """
    Generates the Fibonacci sequence up to n terms.

    The sequence starts with two ones. Bounding n is the caller's job,
    non-positive values simply give an empty list.

    Args:
        n: Number of terms to generate.

    Returns:
        List of Fibonacci numbers.
    """
    if n <= 0:
        return []
    if n == 1:
        return [1]
    if n == 2:
        return [1, 1]

    sequence = [1, 1]
    for i in range(2, n):
        sequence.append(sequence[i - 1] + sequence[i - 2])
    return sequence


def to_binary(value: int) -> str:
    """Convert a number to its binary representation (no '0b' prefix)."""
    return format(value, "b")


def sequence_rows(sequence: list[int]) -> list[tuple[str, str, str]]:
    """
    Build the rows of the sequence table.

    Returns:
        One (1-based index, value with thousands separators, binary) tuple per term.
    """
    return [
        (str(index + 1), f"{value:,}", to_binary(value))
        for index, value in enumerate(sequence)
    ]


def parse_term_count(text: str) -> int:
    """
    Validate the term count typed by the user.

    Args:
        text: Raw content of the input field.

    Returns:
        The term count, guaranteed to be in [MIN_TERMS, MAX_TERMS].

    Raises:
        TermCountError: If the text is not a number, or the number is out of range.
            For values above the maximum, `suggested` holds MAX_TERMS.
    """
    match = _LEADING_INT.match(text or "")
    if match is None:
        raise TermCountError(f"Please enter a valid number ({MIN_TERMS}-{MAX_TERMS})")

    terms = int(match.group(1))
    if terms < MIN_TERMS:
        raise TermCountError(f"Please enter a valid number ({MIN_TERMS}-{MAX_TERMS})")
    if terms > MAX_TERMS:
        raise TermCountError(f"Maximum {MAX_TERMS} terms allowed", suggested=MAX_TERMS)

    logger.debug(f"Accepted term count: {terms}")
    return terms
