from collections.abc import Callable

import pytest

from libmingwld.linker.libraries import FileSystem


class FakeFileSystem(FileSystem):
    """In-memory file system with POSIX separators, remembers every existence query."""

    def __init__(self, *files: str) -> None:
        self.files = set(files)
        self.queries: list[str] = []

    def join(self, directory: str, name: str) -> str:
        return f"{directory.rstrip('/')}/{name}"

    def exists(self, path: str) -> bool:
        self.queries.append(path)
        return path in self.files


@pytest.fixture
def fake_filesystem() -> Callable[..., FakeFileSystem]:
    return FakeFileSystem
