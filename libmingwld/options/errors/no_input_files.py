from libmingwld.exceptions import MingwLdError


class NoInputFilesError(MingwLdError):
    """Nothing to link: neither input files nor `-l` libraries were given."""

    def __repr__(self) -> str:
        return "no input files"
