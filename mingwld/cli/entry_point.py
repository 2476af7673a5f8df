import sys

from libmingwld.linker.driver import link
from mingwld.cli.config import load_driver_config
from mingwld.cli.errors import cli_mingwld_error_handler
from mingwld.cli.executable import cli_get_executable_program


def cli_entry_point(argv: list[str] | None = None) -> None:
    """CLI main entry."""
    if argv is None:
        argv = sys.argv
    prog = cli_get_executable_program(
        override=argv[0] if argv else None,
        warn_proper_installation=True,
    )

    config = load_driver_config()
    with cli_mingwld_error_handler(
        debug_user_friendly_errors=config.debug_user_friendly_errors,
    ):
        is_linked = link(
            [prog, *argv[1:]],
            linker_executable=config.linker_executable,
        )

    sys.exit(0 if is_linked else 1)


if __name__ == "__main__":
    cli_entry_point()
