from libmingwld.exceptions import MingwLdError


class UnresolvedLibraryError(MingwLdError):
    """No library file for an `-l` option found in any of search paths."""

    def __init__(self, name: str, search_paths: list[str]) -> None:
        super().__init__(name)
        self.name = name
        self.search_paths = search_paths

    def __repr__(self) -> str:
        return f"unable to find library -l{self.name}"
