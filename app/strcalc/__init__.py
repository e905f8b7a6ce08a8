"""
strcalc - A String Calculator

This package contains:
- calculator: delimiter parsing and summation (the add() operation)
- errors: exceptions raised for bad input
- printer: timestamped console reporting
- config: configuration loading
- logging_config: logging setup
"""

from .calculator import StringCalculator, add
from .config import Config
from .errors import CalculatorError, MalformedHeaderError, NegativeNumbersError

__version__ = "0.1.0"
__all__ = [
    "add",
    "StringCalculator",
    "Config",
    "CalculatorError",
    "NegativeNumbersError",
    "MalformedHeaderError",
]
