from __future__ import annotations

from typing import TYPE_CHECKING

from libmingwld.linker.backend import LinkerBackend, ProcessLinkerBackend
from libmingwld.linker.command_composer import (
    LLD_LINK_PROGRAM,
    compose_coff_linker_command,
)
from libmingwld.options.parser import parse_arguments

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from libmingwld.linker.libraries import FileSystem


def link(  # noqa: PLR0913
    argv: Sequence[str],
    *,
    backend: LinkerBackend | None = None,
    filesystem: FileSystem | None = None,
    program: str = LLD_LINK_PROGRAM,
    linker_executable: Path | None = None,
) -> bool:
    """Link with GNU ld style arguments (first one is program name) by translating them for COFF linker.

    Returns result of linker backend as-is, or `True` for dry run (`-###`) which only prints command.
    Raises on first error in arguments or library search, nothing is linked then.
    """
    args = parse_arguments(argv[1:])
    verbose = args.has("verbose")

    command = compose_coff_linker_command(
        args,
        filesystem=filesystem,
        program=program,
        verbose=verbose,
    )

    is_dry_run = args.has("dry_run")
    if verbose or is_dry_run:
        print(" ".join(command), flush=True)

    if is_dry_run:
        return True

    if backend is None:
        backend = ProcessLinkerBackend(linker_executable, verbose=verbose)
    return backend(command)
