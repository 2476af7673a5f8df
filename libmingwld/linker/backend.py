from __future__ import annotations

from shutil import which
from subprocess import run
from typing import TYPE_CHECKING, Protocol

from libmingwld.linker.errors import LinkerBackendNotFoundError
from mingwld.cli.output import cli_message

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class LinkerBackend(Protocol):
    """Performs actual linkage from composed `lld-link` command, reports success."""

    def __call__(self, command: Sequence[str]) -> bool: ...


class ProcessLinkerBackend(LinkerBackend):
    """Runs COFF linker as an new process, first command element is replaced with linker executable."""

    def __init__(
        self,
        executable: Path | str | None = None,
        *,
        verbose: bool = False,
    ) -> None:
        self.executable = executable
        self.verbose = verbose

    def __call__(self, command: Sequence[str]) -> bool:
        program, *flags = command
        executable = which(self.executable or program)
        if executable is None:
            raise LinkerBackendNotFoundError(str(self.executable or program))

        cli_message(
            level="INFO",
            text=f"Running linker backend `{executable}`...",
            verbose=self.verbose,
        )
        process = run(
            [executable, *flags],
            check=False,
            shell=False,
        )
        if process.returncode != 0:
            cli_message(
                level="ERROR",
                text=f"Linker backend process failed with exit code {process.returncode}!",
            )
        return process.returncode == 0
