from .backend_not_found import LinkerBackendNotFoundError
from .unresolved_library import UnresolvedLibraryError
from .unsupported_machine import UnsupportedMachineError

__all__ = [
    "LinkerBackendNotFoundError",
    "UnresolvedLibraryError",
    "UnsupportedMachineError",
]
