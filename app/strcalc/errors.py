"""
Errors Module

Exceptions raised by the string calculator.
All of them derive from ValueError so callers can treat bad input uniformly.
"""

from typing import List


class CalculatorError(ValueError):
    """Base exception for calculator errors."""
    pass


class NegativeNumbersError(CalculatorError):
    """
    Raised when the input contains one or more negative numbers.

    Every offending value is collected, in order of appearance,
    so the caller sees all of them at once.
    """

    def __init__(self, negatives: List[int]):
        self.negatives = list(negatives)
        joined = ",".join(str(n) for n in self.negatives)
        super().__init__(f"negatives not allowed: {joined}")


class MalformedHeaderError(CalculatorError):
    """Raised when a '//' delimiter header is not terminated by a newline."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"delimiter header is missing its terminating newline: {text!r}")
