"""
Calculator Module

The string calculator core. `add()` takes a delimited string of numbers
and returns their sum. It runs in three stages:

1. Header resolution - an optional "//" header declares custom delimiters
2. Tokenization      - the numbers text is split into integers
3. Validation        - negatives are rejected, values over the ceiling skipped

Input forms:
    "1,2\\n3"               default delimiters (comma and newline)
    "//;\\n1;2"             single custom delimiter
    "//[***]\\n1***2"       bracketed delimiter of any length
    "//[*][%]\\n1*2%3"      several bracketed delimiters

Custom delimiters are added to the defaults, never replace them.
Everything here is a pure function of its input, so it is safe to call
from any number of threads.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import MalformedHeaderError, NegativeNumbersError
from .logging_config import get_logger

logger = get_logger("calculator")

DEFAULT_DELIMITERS: Tuple[str, ...] = (",", "\n")
HEADER_MARKER = "//"
CEILING = 1000

_BRACKETED = re.compile(r"\[(.*?)\]")
_INTEGER = re.compile(r"[+-]?[0-9]+")

# Tokens outside the signed 32-bit range are not valid numbers.
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


@dataclass(frozen=True)
class ParsedInput:
    """Numbers text plus the delimiters to split it with (longest first)."""
    numbers: str
    delimiters: Tuple[str, ...]


# =============================================================================
# Header Resolution
# =============================================================================

def parse_header_delimiters(header: str) -> List[str]:
    """
    Extract the custom delimiters declared by a header.

    "[***][%]" yields ["***", "%"]; anything not in bracket form is taken
    whole as a single delimiter. Empty delimiters are dropped.
    """
    if header.startswith("[") and "]" in header:
        found = _BRACKETED.findall(header)
    else:
        found = [header]
    return [d for d in found if d]


def _order_delimiters(delimiters: Iterable[str]) -> Tuple[str, ...]:
    # Longest first so "***" is never consumed as three "*".
    unique = dict.fromkeys(d for d in delimiters if d)
    return tuple(sorted(unique, key=len, reverse=True))


def parse_input(text: str) -> ParsedInput:
    """
    Resolve the active delimiters and the numbers text.

    Raises:
        MalformedHeaderError: If the input starts with "//" but has no newline
    """
    if not text.startswith(HEADER_MARKER):
        return ParsedInput(numbers=text, delimiters=_order_delimiters(DEFAULT_DELIMITERS))

    newline_idx = text.find("\n")
    if newline_idx == -1:
        raise MalformedHeaderError(text)

    header = text[len(HEADER_MARKER):newline_idx]
    custom = parse_header_delimiters(header)
    logger.debug("Header %r declared delimiters %s", header, custom)

    return ParsedInput(
        numbers=text[newline_idx + 1:],
        delimiters=_order_delimiters(list(DEFAULT_DELIMITERS) + custom),
    )


def build_split_pattern(delimiters: Sequence[str]) -> "re.Pattern[str]":
    """Compile an alternation of the delimiters, each matched literally."""
    return re.compile("|".join(re.escape(d) for d in _order_delimiters(delimiters)))


# =============================================================================
# Tokenization
# =============================================================================

def split_to_ints(numbers: str, delimiters: Sequence[str]) -> List[int]:
    """
    Split the numbers text and parse each token as an integer.

    Blank tokens are skipped, and tokens that are not integers or fall
    outside the 32-bit signed range are silently discarded. Order of
    appearance is preserved.
    """
    if not numbers:
        return []

    values = []
    for token in build_split_pattern(delimiters).split(numbers):
        token = token.strip()
        if not token:
            continue
        value = int(token) if _INTEGER.fullmatch(token) else None
        if value is None or not INT_MIN <= value <= INT_MAX:
            logger.debug("Ignoring unparseable token %r", token)
            continue
        values.append(value)
    return values


# =============================================================================
# Validation & Reduction
# =============================================================================

def check_negatives(values: Iterable[int]) -> None:
    """
    Raises:
        NegativeNumbersError: Listing every negative value, in order
    """
    negatives = [n for n in values if n < 0]
    if negatives:
        raise NegativeNumbersError(negatives)


def sum_within_ceiling(values: Iterable[int], ceiling: int = CEILING) -> int:
    """Sum the values, skipping any above the ceiling."""
    return sum(n for n in values if n <= ceiling)


def add(text: Optional[str]) -> int:
    """
    Sum the numbers in a delimited string.

    Args:
        text: Input string; None and "" both yield 0

    Returns:
        Sum of all values up to and including 1000

    Raises:
        NegativeNumbersError: If any value is negative
        MalformedHeaderError: If a "//" header has no terminating newline
    """
    if not text:
        return 0

    parsed = parse_input(text)
    values = split_to_ints(parsed.numbers, parsed.delimiters)
    check_negatives(values)
    total = sum_within_ceiling(values)
    logger.debug("add(%r) = %d", text, total)
    return total


class StringCalculator:
    """
    Object wrapper around add().

    Holds no state; one instance can be shared freely.
    """

    def add(self, text: Optional[str]) -> int:
        return add(text)
