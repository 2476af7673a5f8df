from collections.abc import Callable
from pathlib import Path

import pytest

from libmingwld.linker.errors import UnresolvedLibraryError
from libmingwld.linker.libraries import FileSystem, HostFileSystem, search_library


def test_search_library_prefers_import_library(fake_filesystem: Callable[..., FileSystem]) -> None:
    filesystem = fake_filesystem("/lib/libfoo.dll.a", "/lib/libfoo.a")
    library = search_library("foo", ["/lib"], prefer_static=False, filesystem=filesystem)
    assert library == "/lib/libfoo.dll.a"


def test_search_library_prefer_static(fake_filesystem: Callable[..., FileSystem]) -> None:
    filesystem = fake_filesystem("/lib/libfoo.dll.a", "/lib/libfoo.a")
    library = search_library("foo", ["/lib"], prefer_static=True, filesystem=filesystem)

    assert library == "/lib/libfoo.a"
    assert filesystem.queries == ["/lib/libfoo.a"]


def test_search_library_directories_in_order(fake_filesystem: Callable[..., FileSystem]) -> None:
    filesystem = fake_filesystem("/first/libfoo.a", "/second/libfoo.dll.a")
    library = search_library("foo", ["/first", "/second"], prefer_static=False, filesystem=filesystem)

    # Directory order beats import library preference
    assert library == "/first/libfoo.a"
    assert filesystem.queries == ["/first/libfoo.dll.a", "/first/libfoo.a"]


def test_search_library_exact_name(fake_filesystem: Callable[..., FileSystem]) -> None:
    filesystem = fake_filesystem("/second/foo.lib", "/first/libfoo.lib.a")
    library = search_library(":foo.lib", ["/first", "/second"], prefer_static=False, filesystem=filesystem)

    assert library == "/second/foo.lib"
    assert filesystem.queries == ["/first/foo.lib", "/second/foo.lib"]


def test_search_library_exact_name_not_found(fake_filesystem: Callable[..., FileSystem]) -> None:
    filesystem = fake_filesystem("/lib/libfoo.a")
    with pytest.raises(UnresolvedLibraryError) as error:
        search_library(":foo", ["/lib"], prefer_static=False, filesystem=filesystem)
    assert repr(error.value) == "unable to find library -l:foo"


def test_search_library_not_found(fake_filesystem: Callable[..., FileSystem]) -> None:
    filesystem = fake_filesystem()
    with pytest.raises(UnresolvedLibraryError) as error:
        search_library("bar", ["/lib", "/usr/lib"], prefer_static=False, filesystem=filesystem)

    assert error.value.name == "bar"
    assert error.value.search_paths == ["/lib", "/usr/lib"]
    assert repr(error.value) == "unable to find library -lbar"


def test_search_library_without_search_paths(fake_filesystem: Callable[..., FileSystem]) -> None:
    with pytest.raises(UnresolvedLibraryError):
        search_library("foo", [], prefer_static=False, filesystem=fake_filesystem())


def test_search_library_host_filesystem(tmp_path: Path) -> None:
    (tmp_path / "libfoo.a").touch()
    (tmp_path / "libbar.dll.a").touch()
    (tmp_path / "libbar.a").touch()
    filesystem = HostFileSystem()

    assert search_library("foo", [str(tmp_path)], prefer_static=False, filesystem=filesystem) == str(
        tmp_path / "libfoo.a",
    )
    assert search_library("bar", [str(tmp_path)], prefer_static=False, filesystem=filesystem) == str(
        tmp_path / "libbar.dll.a",
    )
    assert search_library("bar", [str(tmp_path)], prefer_static=True, filesystem=filesystem) == str(
        tmp_path / "libbar.a",
    )
