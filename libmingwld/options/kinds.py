from enum import Enum, auto


class OptionKind(Enum):
    """How an option takes its value from the command line."""

    # `-shared`, no value at all
    FLAG = auto()

    # `-Lpath`, value is attached to the spelling
    JOINED = auto()

    # `--entry main`, value is the next token
    SEPARATE = auto()

    # `-o a.exe` or `-oa.exe`
    JOINED_OR_SEPARATE = auto()

    # `--exclude-libs=a,b`, attached value is a comma separated list
    COMMA_JOINED = auto()

    # Pseudo kinds for tokens that are not an option from the table
    INPUT = auto()
    UNKNOWN = auto()

    @property
    def accepts_joined_value(self) -> bool:
        return self in (
            OptionKind.JOINED,
            OptionKind.JOINED_OR_SEPARATE,
            OptionKind.COMMA_JOINED,
        )
