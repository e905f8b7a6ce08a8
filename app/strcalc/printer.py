"""
Printer Module

Leveled, timestamped console output for reporting calculator outcomes:

    [2024-05-01 12:00:00] INFO    Evaluating '1,2'
    [2024-05-01 12:00:00] SUCCESS add('1,2') = 3

The calculator itself never prints; this is for runners and demos.
"""

from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.markup import escape

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

LEVEL_STYLES = {
    "INFO": "cyan",
    "SUCCESS": "bold green",
    "ERROR": "bold red",
}


class Printer:
    """
    Writes messages to a rich Console with a timestamp and level.

    Args:
        console: Console to write to (a new stdout Console by default)
        timestamp_format: strftime format for the timestamp
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    ):
        self.console = console or Console()
        self.timestamp_format = timestamp_format

    def info(self, message: str) -> None:
        self._log("INFO", message)

    def success(self, message: str) -> None:
        self._log("SUCCESS", message)

    def error(self, message: str) -> None:
        self._log("ERROR", message)

    def _log(self, level: str, message: str) -> None:
        timestamp = datetime.now().strftime(self.timestamp_format)
        style = LEVEL_STYLES[level]
        # Pad before styling so markup does not count toward the width.
        label = f"[{style}]{level:<7}[/{style}]"
        self.console.print(
            f"[dim]{escape(f'[{timestamp}]')}[/dim] {label} {escape(message)}",
            highlight=False,
            soft_wrap=True,
        )


_default_printer: Optional[Printer] = None


def get_printer() -> Printer:
    """Get the shared default printer."""
    global _default_printer
    if _default_printer is None:
        _default_printer = Printer()
    return _default_printer


def info(message: str) -> None:
    get_printer().info(message)


def success(message: str) -> None:
    get_printer().success(message)


def error(message: str) -> None:
    get_printer().error(message)
