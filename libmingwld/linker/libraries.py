"""Library search for `-l` options.

GNU ld on MinGW searches for `lib<name>.dll.a` (import library of an DLL) and then for `lib<name>.a` (static archive)
in each of `-L` directories. `-l:<file>` asks for an exact file name instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Final, Protocol

from libmingwld.linker.errors import UnresolvedLibraryError

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

# `-l:libfoo.lib` links exactly `libfoo.lib` without `lib*.a` naming convention
EXACT_NAME_MARKER: Final = ":"


class FileSystem(Protocol):
    """File existence queries used by library search."""

    def join(self, directory: str, name: str) -> str: ...

    def exists(self, path: str) -> bool: ...


class HostFileSystem(FileSystem):
    """File system of the host where linker runs."""

    def join(self, directory: str, name: str) -> str:
        return str(Path(directory) / name)

    def exists(self, path: str) -> bool:
        return Path(path).exists()


def search_library(
    name: str,
    search_paths: Sequence[str],
    *,
    prefer_static: bool,
    filesystem: FileSystem,
) -> str:
    """Resolve library name from `-l` into an existing file path.

    Import library (dynamic linkage) is preferred over static archive within same directory,
    unless static linkage is preferred (`-Bstatic`). Directories are searched in given order.
    """
    for path in _library_path_candidates(name, search_paths, prefer_static=prefer_static, filesystem=filesystem):
        if filesystem.exists(path):
            return path
    raise UnresolvedLibraryError(name, list(search_paths))


def _library_path_candidates(
    name: str,
    search_paths: Sequence[str],
    *,
    prefer_static: bool,
    filesystem: FileSystem,
) -> Iterator[str]:
    if name.startswith(EXACT_NAME_MARKER):
        exact_name = name.removeprefix(EXACT_NAME_MARKER)
        for directory in search_paths:
            yield filesystem.join(directory, exact_name)
        return

    for directory in search_paths:
        if not prefer_static:
            yield filesystem.join(directory, f"lib{name}.dll.a")
        yield filesystem.join(directory, f"lib{name}.a")
