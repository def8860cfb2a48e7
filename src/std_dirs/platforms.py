"""Platform identifiers understood by the directory resolver.

The resolver only distinguishes "windows" and "macos"; every other identifier
(linux, freebsd, ...) takes the Unix-like XDG defaults.
"""

import sys
from enum import StrEnum


class Platform(StrEnum):
    """Identifiers with a dedicated fallback branch."""

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"


def current_platform() -> str:
    """Identify the running OS using the resolver's vocabulary."""
    if sys.platform in ("win32", "cygwin"):
        return Platform.WINDOWS
    if sys.platform == "darwin":
        return Platform.MACOS
    # "linux", "freebsd14", "openbsd7" -> strip trailing release digits
    return sys.platform.rstrip("0123456789") or Platform.LINUX
