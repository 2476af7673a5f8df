"""Entry point for CLI.

Only for calling via `python -m mingwld`, which is considered as bad practice.
"""

from mingwld.cli.entry_point import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
