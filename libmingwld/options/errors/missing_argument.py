from libmingwld.exceptions import MingwLdError


class MissingArgumentError(MingwLdError):
    def __init__(self, argument: str) -> None:
        super().__init__(argument)
        self.argument = argument

    def __repr__(self) -> str:
        return f"{self.argument}: missing argument"
