"""Declarative option table and parser for GNU ld style command lines."""

from .arguments import ArgumentList, ParsedArgument
from .kinds import OptionKind
from .parser import parse_arguments
from .table import MINGW_OPTION_TABLE, OptionSpec, OptionTable

__all__ = [
    "MINGW_OPTION_TABLE",
    "ArgumentList",
    "OptionKind",
    "OptionSpec",
    "OptionTable",
    "ParsedArgument",
    "parse_arguments",
]
