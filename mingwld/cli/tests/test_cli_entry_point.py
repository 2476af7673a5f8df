from subprocess import CompletedProcess

import pytest

from libmingwld.linker import backend as backend_module
from libmingwld.options.errors import UnknownArgumentError
from mingwld.cli.config import ENV_DEBUG_UNWRAP_ERRORS, ENV_LINKER_EXECUTABLE
from mingwld.cli.entry_point import cli_entry_point


def test_cli_dry_run(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exit_info:
        cli_entry_point(["mingw-ld", "-###", "-o", "app.exe", "-m", "i386pe", "main.o"])

    assert exit_info.value.code == 0
    captured = capsys.readouterr()
    assert captured.out == "lld-link -out:app.exe -machine:x86 -alternatename:__image_base__=___ImageBase main.o\n"
    assert captured.err == ""


@pytest.mark.parametrize(
    ("argv", "diagnostic"),
    [
        (["mingw-ld", "main.o", "--bogus"], "unknown argument: --bogus"),
        (["mingw-ld", "main.o", "-o"], "-o: missing argument"),
        (["mingw-ld", "-shared"], "no input files"),
        (["mingw-ld", "-mi386", "main.o"], "unknown parameter: -mi386"),
        (["mingw-ld", "-###", "-lbar"], "unable to find library -lbar"),
    ],
)
def test_cli_fatal_errors(
    argv: list[str],
    diagnostic: str,
    capsys: pytest.CaptureFixture[str],
) -> None:
    with pytest.raises(SystemExit) as exit_info:
        cli_entry_point(argv)

    assert exit_info.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == f"[ERROR] {diagnostic}\n"


def test_cli_debug_unwrap_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_DEBUG_UNWRAP_ERRORS, "1")
    with pytest.raises(UnknownArgumentError):
        cli_entry_point(["mingw-ld", "main.o", "--bogus"])


def test_cli_links_with_configured_executable(monkeypatch: pytest.MonkeyPatch) -> None:
    commands: list[list[str]] = []

    def fake_run(command: list[str], **_: object) -> CompletedProcess[bytes]:
        commands.append(command)
        return CompletedProcess(command, returncode=0)

    monkeypatch.setenv(ENV_LINKER_EXECUTABLE, "/opt/llvm/bin/lld-link")
    monkeypatch.setattr(backend_module, "which", str)
    monkeypatch.setattr(backend_module, "run", fake_run)

    with pytest.raises(SystemExit) as exit_info:
        cli_entry_point(["mingw-ld", "-shared", "-o", "lib.dll", "lib.o"])

    assert exit_info.value.code == 0
    assert commands == [
        [
            "/opt/llvm/bin/lld-link",
            "-out:lib.dll",
            "-dll",
            "-alternatename:__image_base__=__ImageBase",
            "lib.o",
        ],
    ]


def test_cli_backend_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ENV_LINKER_EXECUTABLE, raising=False)
    monkeypatch.setattr(backend_module, "which", str)
    monkeypatch.setattr(
        backend_module,
        "run",
        lambda command, **_: CompletedProcess(command, returncode=1),
    )

    with pytest.raises(SystemExit) as exit_info:
        cli_entry_point(["mingw-ld", "main.o"])
    assert exit_info.value.code == 1
