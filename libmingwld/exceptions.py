from abc import abstractmethod


class MingwLdError(Exception):
    """Parent for all fatal linker driver errors (exceptions).

    Every error renders itself as a single diagnostic line via `__repr__`.
    """

    @abstractmethod
    def __repr__(self) -> str:
        return f"Some internal error occurred ({super().__repr__()}), that is currently not documented"
