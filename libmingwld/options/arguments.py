from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


@dataclass(frozen=True, slots=True)
class ParsedArgument:
    """Single token (or token pair) matched against an option table."""

    # Canonical option identifier (aliases are already resolved)
    option_id: str

    # Empty for flags, several values for comma joined options
    values: tuple[str, ...]

    # Exactly how user typed an option (e.g `-e` for `--entry`)
    spelling: str

    # Index of the token in source arguments
    index: int

    group: str | None = None

    @property
    def value(self) -> str:
        assert self.values, f"Option {self.spelling} has no value, this is an bug in option table"
        return self.values[0]


@dataclass(frozen=True)
class ArgumentList:
    """Ordered parsed arguments of single invocation, read-only after parsing."""

    arguments: Sequence[ParsedArgument]

    # Token index of an option which value is missing (parse stopped there)
    missing_argument_index: int | None = None

    counts: Counter[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        counts = Counter(argument.option_id for argument in self.arguments)
        object.__setattr__(self, "counts", counts)

    def __iter__(self) -> Iterator[ParsedArgument]:
        return iter(self.arguments)

    def __len__(self) -> int:
        return len(self.arguments)

    def has(self, option_id: str) -> bool:
        return self.counts[option_id] > 0

    def count(self, option_id: str) -> int:
        return self.counts[option_id]

    def get_last(self, option_id: str) -> ParsedArgument | None:
        """Get last occurrence of an option, as later options override earlier ones."""
        for argument in reversed(self.arguments):
            if argument.option_id == option_id:
                return argument
        return None

    def get_last_value(self, option_id: str, default: str = "") -> str:
        argument = self.get_last(option_id)
        return argument.value if argument is not None else default

    def filtered(self, *option_ids: str) -> list[ParsedArgument]:
        """Get every occurrence of any of given options, in command line order."""
        return [argument for argument in self.arguments if argument.option_id in option_ids]

    def filtered_group(self, group: str) -> list[ParsedArgument]:
        return [argument for argument in self.arguments if argument.group == group]
