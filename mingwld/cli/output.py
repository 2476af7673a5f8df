"""Diagnostics output of the CLI, all messages go into stderr as stdout is reserved for linker command."""

from __future__ import annotations

import sys
from typing import Literal, NoReturn, TypeAlias

MessageLevel: TypeAlias = Literal["INFO", "WARNING", "ERROR"]

_LEVEL_COLORS: dict[MessageLevel, str] = {
    "INFO": "\033[94m",
    "WARNING": "\033[93m",
    "ERROR": "\033[91m",
}
_COLOR_RESET = "\033[0m"


def cli_message(level: MessageLevel, text: str, *, verbose: bool = True) -> None:
    """Emit an message prefixed with its level, `INFO` messages are hidden unless verbose."""
    if level == "INFO" and not verbose:
        return

    prefix = f"[{level}]"
    if sys.stderr.isatty():
        prefix = f"{_LEVEL_COLORS[level]}{prefix}{_COLOR_RESET}"
    print(f"{prefix} {text}", file=sys.stderr)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit an error and terminate with failure exit code."""
    cli_message(level="ERROR", text=text)
    sys.exit(1)
