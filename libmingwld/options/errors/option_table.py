from libmingwld.exceptions import MingwLdError


class OptionTableError(MingwLdError):
    """Option table is malformed, this is an bug in the option table itself."""

    def __init__(self, option_id: str, reason: str) -> None:
        super().__init__(option_id, reason)
        self.option_id = option_id
        self.reason = reason

    def __repr__(self) -> str:
        return f"invalid option table entry `{self.option_id}`: {self.reason}"
