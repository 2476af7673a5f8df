from libmingwld.exceptions import MingwLdError


class LinkerBackendNotFoundError(MingwLdError):
    def __init__(self, executable: str) -> None:
        super().__init__(executable)
        self.executable = executable

    def __repr__(self) -> str:
        return f"linker backend executable `{self.executable}` is not found, is LLD installed?"
