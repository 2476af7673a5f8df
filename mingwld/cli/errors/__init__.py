from .error_handler import cli_mingwld_error_handler

__all__ = ["cli_mingwld_error_handler"]
