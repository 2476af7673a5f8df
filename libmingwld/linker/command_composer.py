from __future__ import annotations

from typing import TYPE_CHECKING, Final

from libmingwld.linker.libraries import HostFileSystem, search_library
from libmingwld.linker.machines import (
    coff_machine_from_emulation,
    image_base_alternate_name,
)
from libmingwld.options.table import OPTION_INPUT
from mingwld.cli.output import cli_message

if TYPE_CHECKING:
    from libmingwld.linker.libraries import FileSystem
    from libmingwld.options.arguments import ArgumentList

LLD_LINK_PROGRAM: Final = "lld-link"

# Outputs when `-o` is not given
DEFAULT_EXECUTABLE_OUTPUT: Final = "a.exe"
DEFAULT_SHARED_OUTPUT: Final = "a.dll"


def compose_coff_linker_command(
    args: ArgumentList,
    *,
    filesystem: FileSystem | None = None,
    program: str = LLD_LINK_PROGRAM,
    verbose: bool = False,
) -> list[str]:
    """Compose `lld-link` command from parsed GNU ld arguments.

    Emission order is fixed and does not follow order of given arguments,
    only inputs and libraries keep their relative order.
    Raises if machine is unknown or any library cannot be found.
    """
    filesystem = filesystem or HostFileSystem()
    command: list[str] = [program]

    # Single valued options, last one wins
    if entry := args.get_last("entry"):
        command.append(f"-entry:{entry.value}")
    if subsystem := args.get_last("subsystem"):
        command.append(f"-subsystem:{subsystem.value}")
    if implib := args.get_last("out_implib"):
        command.append(f"-implib:{implib.value}")
    if stack := args.get_last("stack"):
        command.append(f"-stack:{stack.value}")

    # Output file and its format
    is_shared = args.has("shared")
    if output := args.get_last("o"):
        command.append(f"-out:{output.value}")
    elif is_shared:
        command.append(f"-out:{DEFAULT_SHARED_OUTPUT}")
    else:
        command.append(f"-out:{DEFAULT_EXECUTABLE_OUTPUT}")

    if is_shared:
        command.append("-dll")

    # Target machine
    emulation = args.get_last_value("m")
    if args.has("m"):
        command.append(f"-machine:{coff_machine_from_emulation(emulation)}")

    # Propagated LLVM options
    command.extend(f"-mllvm:{mllvm.value}" for mllvm in args.filtered("mllvm"))

    # GNU `__image_base__` is `__ImageBase` for COFF
    command.append(f"-alternatename:{image_base_alternate_name(emulation)}")

    # Inputs and libraries
    search_paths = [search_path.value for search_path in args.filtered("L")]
    prefer_static = args.has("Bstatic")
    for argument in args.filtered(OPTION_INPUT, "l"):
        if argument.option_id == OPTION_INPUT:
            command.append(argument.value)
            continue

        library = search_library(
            argument.value,
            search_paths,
            prefer_static=prefer_static,
            filesystem=filesystem,
        )
        cli_message(
            level="INFO",
            text=f"Resolved library -l{argument.value} as `{library}`",
            verbose=verbose,
        )
        command.append(library)

    if args.has("verbose"):
        command.append("-verbose")

    return command
