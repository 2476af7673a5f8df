from libmingwld.exceptions import MingwLdError


class UnsupportedMachineError(MingwLdError):
    def __init__(self, emulation: str) -> None:
        super().__init__(emulation)
        self.emulation = emulation

    def __repr__(self) -> str:
        return f"unknown parameter: -m{self.emulation}"
