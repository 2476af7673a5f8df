"""Parser of raw command line arguments into an `ArgumentList` driven by an option table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from libmingwld.options.arguments import ArgumentList, ParsedArgument
from libmingwld.options.errors import (
    MissingArgumentError,
    NoInputFilesError,
    UnknownArgumentError,
)
from libmingwld.options.kinds import OptionKind
from libmingwld.options.table import (
    MINGW_OPTION_TABLE,
    OPTION_INPUT,
    OPTION_UNKNOWN,
    OptionSpec,
    OptionTable,
)

if TYPE_CHECKING:
    from collections.abc import Sequence


def parse_arguments(
    argv: Sequence[str],
    table: OptionTable = MINGW_OPTION_TABLE,
) -> ArgumentList:
    """Parse and validate arguments (without program name).

    Raises first error found: missing option value, unknown option, absence of any input.
    """
    args = tokenize_arguments(argv, table)

    if args.missing_argument_index is not None:
        raise MissingArgumentError(argv[args.missing_argument_index])

    unknowns = args.filtered(OPTION_UNKNOWN)
    if unknowns:
        raise UnknownArgumentError(unknowns[0].spelling)

    if not args.has(OPTION_INPUT) and not args.has("l"):
        raise NoInputFilesError

    return args


def tokenize_arguments(argv: Sequence[str], table: OptionTable) -> ArgumentList:
    """Classify every token without validation, stops at an option with missing value."""
    arguments: list[ParsedArgument] = []

    index = 0
    while index < len(argv):
        token = argv[index]

        if not token.startswith("-") or token == "-":
            arguments.append(
                ParsedArgument(
                    option_id=OPTION_INPUT,
                    values=(token,),
                    spelling=token,
                    index=index,
                ),
            )
            index += 1
            continue

        matched = _match_option(token, table)
        if matched is None:
            arguments.append(
                ParsedArgument(
                    option_id=OPTION_UNKNOWN,
                    values=(),
                    spelling=token,
                    index=index,
                ),
            )
            index += 1
            continue

        spec, spelling = matched
        values, consumed = _take_option_values(spec, spelling, argv, index)
        if values is None:
            return ArgumentList(arguments, missing_argument_index=index)

        arguments.append(
            ParsedArgument(
                option_id=table.canonical_id(spec),
                values=values,
                spelling=spelling,
                index=index,
                group=spec.group,
            ),
        )
        index += consumed

    return ArgumentList(arguments)


def _match_option(token: str, table: OptionTable) -> tuple[OptionSpec, str] | None:
    # First matching entry in table order wins
    for spec in table:
        spelling = spec.match(token)
        if spelling is not None:
            return spec, spelling
    return None


def _take_option_values(
    spec: OptionSpec,
    spelling: str,
    argv: Sequence[str],
    index: int,
) -> tuple[tuple[str, ...] | None, int]:
    """Get values of an option and amount of tokens it takes, `None` values when value is missing."""
    attached = argv[index].removeprefix(spelling)

    match spec.kind:
        case OptionKind.FLAG:
            return (), 1
        case OptionKind.JOINED:
            return ((attached,) if attached else None), 1
        case OptionKind.COMMA_JOINED:
            if not attached:
                return None, 1
            return tuple(value for value in attached.split(",") if value), 1
        case OptionKind.SEPARATE:
            if index + 1 >= len(argv):
                return None, 1
            return (argv[index + 1],), 2
        case OptionKind.JOINED_OR_SEPARATE:
            if attached:
                return (attached,), 1
            if index + 1 >= len(argv):
                return None, 1
            return (argv[index + 1],), 2
        case OptionKind.INPUT | OptionKind.UNKNOWN:
            msg = f"Option table entry `{spec.id}` cannot have pseudo kind {spec.kind.name}"
            raise ValueError(msg)
