# GNU ld emulations (`-m`) supported by MinGW and their `lld-link` machine types
from collections.abc import Mapping
from typing import Final, Literal, TypeAlias

from libmingwld.linker.errors import UnsupportedMachineError

COFF_MACHINE_TYPES: TypeAlias = Literal["x86", "x64", "arm", "arm64"]

# Only 32-bit x86 decorates C symbols with leading underscore
EMULATION_I386: Final = "i386pe"

MINGW_EMULATION_MACHINE_MAPPING: Mapping[str, COFF_MACHINE_TYPES] = {
    EMULATION_I386: "x86",
    "i386pep": "x64",
    "thumb2pe": "arm",
    "arm64pe": "arm64",
}


def coff_machine_from_emulation(emulation: str) -> COFF_MACHINE_TYPES:
    machine = MINGW_EMULATION_MACHINE_MAPPING.get(emulation)
    if machine is None:
        raise UnsupportedMachineError(emulation)
    return machine


def image_base_alternate_name(emulation: str) -> str:
    """Get `-alternatename` which maps GNU `__image_base__` onto COFF `__ImageBase` with symbol decoration of the emulation."""
    if emulation == EMULATION_I386:
        return "__image_base__=___ImageBase"
    return "__image_base__=__ImageBase"
