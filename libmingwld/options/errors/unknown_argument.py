from libmingwld.exceptions import MingwLdError


class UnknownArgumentError(MingwLdError):
    def __init__(self, spelling: str) -> None:
        super().__init__(spelling)
        self.spelling = spelling

    def __repr__(self) -> str:
        return f"unknown argument: {self.spelling}"
