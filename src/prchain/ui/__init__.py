"""Terminal output and prompts."""

from prchain.ui.output import (
    BLUE,
    GRAY,
    GREEN,
    MAGENTA,
    NC,
    RED,
    YELLOW,
    error,
    error_with_detail,
    log,
    success,
    success_with_detail,
    warn,
)

__all__ = [
    # Colors
    "RED",
    "GREEN",
    "YELLOW",
    "BLUE",
    "GRAY",
    "MAGENTA",
    "NC",
    # Functions
    "log",
    "success",
    "warn",
    "error",
    "success_with_detail",
    "error_with_detail",
]
