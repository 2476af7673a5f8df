"""Option table (schema) of GNU ld options understood by the MinGW driver.

Table order is significant: parser takes the first entry that accepts a token,
so entries with longer spellings must precede single letter joined options
(e.g `--entry` before `-e`, `-mllvm` before `-m`). That is checked when table is constructed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from libmingwld.options.errors.option_table import OptionTableError
from libmingwld.options.kinds import OptionKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

# Pseudo option identifiers for tokens that are not described by the table
OPTION_INPUT: Final = "INPUT"
OPTION_UNKNOWN: Final = "UNKNOWN"

# Options from that group are accepted for compatibility and dropped
GROUP_IGNORED: Final = "ignored"

# Both GNU spellings (`-shared` and `--shared`) are accepted for most options
PREFIXES_ANY: Final = ("--", "-")
PREFIXES_SINGLE: Final = ("-",)
PREFIXES_DOUBLE: Final = ("--",)


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """Single entry of an option table."""

    id: str
    name: str
    kind: OptionKind
    prefixes: tuple[str, ...] = PREFIXES_ANY

    # Canonical option this one is an alternative spelling for
    alias: str | None = None
    group: str | None = None

    help: str | None = None
    metavar: str | None = None

    @property
    def spellings(self) -> tuple[str, ...]:
        return tuple(prefix + self.name for prefix in self.prefixes)

    def match(self, token: str) -> str | None:
        """Get spelling of that option which given token is written with, if that token is this option."""
        for spelling in self.spellings:
            if self.kind.accepts_joined_value:
                if token.startswith(spelling):
                    return spelling
            elif token == spelling:
                return spelling
        return None


class OptionTable:
    """Ordered and validated sequence of option specifications."""

    def __init__(self, specs: Iterable[OptionSpec]) -> None:
        self._specs = tuple(specs)
        self._by_id: dict[str, OptionSpec] = {}

        for spec in self._specs:
            if spec.id in self._by_id or spec.id in (OPTION_INPUT, OPTION_UNKNOWN):
                raise OptionTableError(spec.id, "option identifier is not unique")
            if spec.kind in (OptionKind.INPUT, OptionKind.UNKNOWN):
                raise OptionTableError(spec.id, f"pseudo kind {spec.kind.name} cannot be used in table")
            self._by_id[spec.id] = spec

        for spec in self._specs:
            self._validate_alias(spec)
        self._validate_reachability()

    def __iter__(self) -> Iterator[OptionSpec]:
        return iter(self._specs)

    def __getitem__(self, option_id: str) -> OptionSpec:
        return self._by_id[option_id]

    def canonical_id(self, spec: OptionSpec) -> str:
        return spec.alias if spec.alias is not None else spec.id

    def _validate_alias(self, spec: OptionSpec) -> None:
        if spec.alias is None:
            return
        target = self._by_id.get(spec.alias)
        if target is None:
            raise OptionTableError(spec.id, f"alias target `{spec.alias}` is not defined")
        if target.alias is not None:
            raise OptionTableError(
                spec.id,
                f"alias target `{spec.alias}` is an alias itself",
            )

    def _validate_reachability(self) -> None:
        # Earlier joined option with spelling `-m` swallows every later `-m...` spelling
        for index, spec in enumerate(self._specs):
            for earlier in self._specs[:index]:
                if not earlier.kind.accepts_joined_value:
                    continue
                for spelling in spec.spellings:
                    shadow = earlier.match(spelling)
                    if shadow is not None:
                        raise OptionTableError(
                            spec.id,
                            f"spelling `{spelling}` is shadowed by `{shadow}` ({earlier.id}) defined earlier",
                        )


def _flag(
    option_id: str,
    name: str | None = None,
    *,
    prefixes: tuple[str, ...] = PREFIXES_ANY,
    alias: str | None = None,
    help: str | None = None,  # noqa: A002
) -> OptionSpec:
    return OptionSpec(
        id=option_id,
        name=name or option_id,
        kind=OptionKind.FLAG,
        prefixes=prefixes,
        alias=alias,
        help=help,
    )


def _ignored(option_id: str, name: str, kind: OptionKind) -> OptionSpec:
    return OptionSpec(
        id=f"ignored_{option_id}",
        name=name,
        kind=kind,
        group=GROUP_IGNORED,
    )


MINGW_OPTION_TABLE: Final = OptionTable(
    (
        # Ignored options must precede `-e` / `-m` / `-l` / `-O` joined options as they share first letter
        _ignored("major_image_version", "major-image-version", OptionKind.SEPARATE),
        _ignored("minor_image_version", "minor-image-version", OptionKind.SEPARATE),
        _ignored("no_seh", "no-seh", OptionKind.FLAG),
        _ignored("nxcompat", "nxcompat", OptionKind.FLAG),
        _ignored("pic_executable", "pic-executable", OptionKind.FLAG),
        _ignored("plugin", "plugin", OptionKind.SEPARATE),
        _ignored("plugin_eq", "plugin=", OptionKind.JOINED),
        _ignored("plugin_opt", "plugin-opt", OptionKind.SEPARATE),
        _ignored("plugin_opt_eq", "plugin-opt=", OptionKind.JOINED),
        _ignored("sysroot", "sysroot=", OptionKind.JOINED),
        _ignored("no_undefined", "no-undefined", OptionKind.FLAG),
        _ignored("dynamicbase", "dynamicbase", OptionKind.FLAG),
        _ignored("large_address_aware", "large-address-aware", OptionKind.FLAG),
        _ignored("enable_auto_image_base", "enable-auto-image-base", OptionKind.FLAG),
        _ignored("disable_auto_image_base", "disable-auto-image-base", OptionKind.FLAG),
        _ignored("allow_multiple_definition", "allow-multiple-definition", OptionKind.FLAG),
        _ignored("enable_auto_import", "enable-auto-import", OptionKind.FLAG),
        _ignored("disable_auto_import", "disable-auto-import", OptionKind.FLAG),
        _ignored("enable_runtime_pseudo_reloc", "enable-runtime-pseudo-reloc", OptionKind.FLAG),
        _ignored("disable_runtime_pseudo_reloc", "disable-runtime-pseudo-reloc", OptionKind.FLAG),
        _ignored("gc_sections", "gc-sections", OptionKind.FLAG),
        _ignored("no_gc_sections", "no-gc-sections", OptionKind.FLAG),
        _ignored("exclude_libs", "exclude-libs=", OptionKind.COMMA_JOINED),
        _ignored("as_needed", "as-needed", OptionKind.FLAG),
        _ignored("no_as_needed", "no-as-needed", OptionKind.FLAG),
        # Entry point
        OptionSpec(
            id="entry",
            name="entry",
            kind=OptionKind.SEPARATE,
            help="Name of entry point symbol",
            metavar="<entry>",
        ),
        OptionSpec(
            id="alias_entry_e",
            name="e",
            kind=OptionKind.JOINED_OR_SEPARATE,
            prefixes=PREFIXES_SINGLE,
            alias="entry",
        ),
        # Target machine
        OptionSpec(id="mllvm", name="mllvm", kind=OptionKind.SEPARATE),
        OptionSpec(
            id="m",
            name="m",
            kind=OptionKind.JOINED_OR_SEPARATE,
            prefixes=PREFIXES_SINGLE,
            help="Set target emulation",
        ),
        # Output
        OptionSpec(
            id="out_implib",
            name="out-implib",
            kind=OptionKind.SEPARATE,
            help="Import library name",
        ),
        OptionSpec(
            id="alias_out_implib_eq",
            name="out-implib=",
            kind=OptionKind.JOINED,
            alias="out_implib",
        ),
        OptionSpec(
            id="o",
            name="o",
            kind=OptionKind.JOINED_OR_SEPARATE,
            prefixes=PREFIXES_SINGLE,
            help="Path to file to write output",
            metavar="<path>",
        ),
        _flag("shared", help="Build a shared object"),
        OptionSpec(
            id="subsystem",
            name="subsystem",
            kind=OptionKind.SEPARATE,
            prefixes=PREFIXES_DOUBLE,
            help="Specify subsystem",
        ),
        OptionSpec(
            id="alias_subsystem_eq",
            name="subsystem=",
            kind=OptionKind.JOINED,
            prefixes=PREFIXES_DOUBLE,
            alias="subsystem",
        ),
        OptionSpec(
            id="stack",
            name="stack",
            kind=OptionKind.SEPARATE,
            prefixes=PREFIXES_DOUBLE,
        ),
        OptionSpec(
            id="alias_stack_eq",
            name="stack=",
            kind=OptionKind.JOINED,
            prefixes=PREFIXES_DOUBLE,
            alias="stack",
        ),
        # Libraries
        OptionSpec(
            id="L",
            name="L",
            kind=OptionKind.JOINED_OR_SEPARATE,
            prefixes=PREFIXES_SINGLE,
            help="Add a directory to the library search path",
            metavar="<dir>",
        ),
        OptionSpec(
            id="l",
            name="l",
            kind=OptionKind.JOINED_OR_SEPARATE,
            prefixes=PREFIXES_SINGLE,
            help="Root name of library to use",
            metavar="<libName>",
        ),
        _flag("Bstatic", prefixes=PREFIXES_SINGLE, help="Do not link against shared libraries"),
        _flag("alias_static", "static", prefixes=PREFIXES_SINGLE, alias="Bstatic"),
        _flag("alias_dn", "dn", prefixes=PREFIXES_SINGLE, alias="Bstatic"),
        _flag("alias_non_shared", "non_shared", prefixes=PREFIXES_SINGLE, alias="Bstatic"),
        _flag("Bdynamic", prefixes=PREFIXES_SINGLE, help="Link against shared libraries"),
        _flag("alias_dy", "dy", prefixes=PREFIXES_SINGLE, alias="Bdynamic"),
        _flag("alias_call_shared", "call_shared", prefixes=PREFIXES_SINGLE, alias="Bdynamic"),
        # Ignored optimization level, after `-o` as it is case sensitive anyway
        _ignored("O", "O", OptionKind.JOINED),
        # Driver behavior
        _flag("verbose", help="Verbose mode"),
        _flag("alias_verbose_v", "v", prefixes=PREFIXES_SINGLE, alias="verbose"),
        _flag(
            "dry_run",
            "###",
            prefixes=PREFIXES_SINGLE,
            help="Print (but do not run) the commands to run for this link",
        ),
    ),
)
