"""std-dirs: standard cache, config and data directories for an application.

Config("my-app") resolves the three directories following XDG overrides and
Windows/macOS/Unix-like conventions, and creates or removes them together.
"""

from .config import Config
from .directory import Directory
from .errors import (
    CacheCreateFailed,
    CacheRemoveFailed,
    ConfigCreateFailed,
    ConfigRemoveFailed,
    CreateError,
    DataCreateFailed,
    DataRemoveFailed,
    DirectoryError,
    RemoveError,
)
from .platforms import Platform, current_platform
from .resolver import DirKind, EnvLookup, ResolvedPaths, resolve, resolve_kind

__all__ = [
    "CacheCreateFailed",
    "CacheRemoveFailed",
    "Config",
    "ConfigCreateFailed",
    "ConfigRemoveFailed",
    "CreateError",
    "DataCreateFailed",
    "DataRemoveFailed",
    "DirKind",
    "Directory",
    "DirectoryError",
    "EnvLookup",
    "Platform",
    "RemoveError",
    "ResolvedPaths",
    "current_platform",
    "resolve",
    "resolve_kind",
]
