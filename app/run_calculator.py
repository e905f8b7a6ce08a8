#!/usr/bin/env python3
"""
strcalc Runner

Run with:
    python run_calculator.py                  # built-in sample inputs
    python run_calculator.py "1,2" "//;\\n1;2"

A literal "\\n" in an argument is read as a newline.
Exit code is the number of inputs that failed, capped at 255.
"""

import sys
import os
from typing import Iterable, List, Optional

# Add app dir to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from strcalc.calculator import add
from strcalc.config import load_config
from strcalc.errors import CalculatorError
from strcalc.logging_config import setup_logging, get_logger
from strcalc.printer import Printer

logger = get_logger("runner")

MAX_EXIT_STATUS = 255

SAMPLE_INPUTS = [
    "",
    "1,2",
    "1\n2,3",
    "//;\n1;2",
    "//[***]\n1***2***3",
    "//[*][%]\n1*2%3",
    "//[***][%]\n1***2%3,4\n0",
    "2,1001",
    "1,-2,-3,4",
]


def run(inputs: Iterable[str], printer: Printer) -> int:
    """
    Evaluate each input and report the outcome.

    Returns:
        Number of inputs that raised a calculator error
    """
    failures = 0
    for text in inputs:
        printer.info(f"Evaluating {text!r}")
        try:
            total = add(text)
        except CalculatorError as e:
            failures += 1
            logger.info(f"Rejected {text!r}: {e}")
            printer.error(f"add({text!r}) failed: {e}")
        else:
            printer.success(f"add({text!r}) = {total}")
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    """
    Evaluate the given inputs, or the samples when none are given.

    Returns:
        Process exit status: the failure count, capped at 255
    """
    config = load_config()
    setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.json_logs,
    )

    args = sys.argv[1:] if argv is None else argv
    inputs = [arg.replace("\\n", "\n") for arg in args] or SAMPLE_INPUTS

    printer = Printer(timestamp_format=config.timestamp_format)
    failures = run(inputs, printer)
    # Exit statuses wrap at 256.
    return min(failures, MAX_EXIT_STATUS)


if __name__ == "__main__":
    sys.exit(main())
