from .missing_argument import MissingArgumentError
from .no_input_files import NoInputFilesError
from .option_table import OptionTableError
from .unknown_argument import UnknownArgumentError

__all__ = [
    "MissingArgumentError",
    "NoInputFilesError",
    "OptionTableError",
    "UnknownArgumentError",
]
