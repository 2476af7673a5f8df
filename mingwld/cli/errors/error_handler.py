import sys
from collections.abc import Generator
from contextlib import contextmanager

from libmingwld.exceptions import MingwLdError
from mingwld.cli.output import cli_fatal_abort, cli_message


@contextmanager
def cli_mingwld_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, None]:
    """Wrap driver to emit its errors as single line diagnostic with failure exit code."""
    try:
        yield
    except MingwLdError as error:
        if debug_user_friendly_errors:
            cli_fatal_abort(repr(error))
        raise  # re-throw exception due to unfriendly flag set for debugging
    except KeyboardInterrupt:
        print(file=sys.stderr)
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        sys.exit(1)
