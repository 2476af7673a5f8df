"""MinGW linker driver library.

Translates GNU ld style command lines into `lld-link` (COFF linker) command lines.
"""

from .linker.driver import link
from .options.parser import parse_arguments

__all__ = [
    "link",
    "parse_arguments",
]
