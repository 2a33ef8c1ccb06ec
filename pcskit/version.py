"""Program name and version strings."""

from __future__ import annotations

PROGRAM_NAME = "pcs"
PROGRAM_VERSION = "v0.3.1"


def full_name(
    version: str = PROGRAM_VERSION,
    api_version: str | None = None,
    debug: bool = False,
) -> str:
    """Return the full program name, e.g. ``pcs v0.3.1``."""
    separator = "(debug) " if debug else " "
    suffix = f" (API {api_version})" if api_version else ""
    return f"{PROGRAM_NAME}{separator}{version}{suffix}"


PROGRAM_FULL_NAME = full_name()