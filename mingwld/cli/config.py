from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping

ENV_LINKER_EXECUTABLE: Final = "MINGWLD_LINKER_EXECUTABLE"
ENV_DEBUG_UNWRAP_ERRORS: Final = "MINGWLD_DEBUG_UNWRAP_ERRORS"


@dataclass(frozen=True, slots=True)
class DriverConfig:
    """Configuration of the driver itself, as GNU ld arguments are passed through."""

    # Overrides `lld-link` executable that is spawned for linkage
    linker_executable: Path | None = None

    # If disabled, errors are raised with traceback instead of single line diagnostic
    debug_user_friendly_errors: bool = True


def load_driver_config(environ: Mapping[str, str] | None = None) -> DriverConfig:
    """Load driver configuration from environment variables."""
    if environ is None:
        environ = os.environ

    linker_executable = environ.get(ENV_LINKER_EXECUTABLE)
    return DriverConfig(
        linker_executable=Path(linker_executable) if linker_executable else None,
        debug_user_friendly_errors=environ.get(ENV_DEBUG_UNWRAP_ERRORS, "0") != "1",
    )
