"""Standard directory resolution.

Maps an application name, a platform identifier and an environment lookup to
cache, config and data paths. Each kind is resolved on its own:

1. The XDG override variable for the kind, if set: ``$XDG_<KIND>_HOME/<app>``
2. windows: ``%APPDATA%/<app>/{Cache,Config,Data}``
3. macos: ``$HOME/Library/{Caches,Preferences,}/<app>``
4. anything else: ``$HOME/{.cache,.config,.local/share}/<app>``

A missing APPDATA or HOME falls back to ".", so resolution never fails.
"""

import os
from collections.abc import Callable
from enum import StrEnum
from pathlib import Path
from typing import NamedTuple

from .platforms import Platform

EnvLookup = Callable[[str], str | None]


class DirKind(StrEnum):
    """Kinds of standard directory, in processing order."""

    CACHE = "cache"
    CONFIG = "config"
    DATA = "data"


OVERRIDE_VARS: dict[DirKind, str] = {
    DirKind.CACHE: "XDG_CACHE_HOME",
    DirKind.CONFIG: "XDG_CONFIG_HOME",
    DirKind.DATA: "XDG_DATA_HOME",
}

# Subfolder of %APPDATA%/<app>
_WINDOWS_SEGMENTS = {DirKind.CACHE: "Cache", DirKind.CONFIG: "Config", DirKind.DATA: "Data"}

# Path between $HOME and <app>
_MACOS_SEGMENTS = {
    DirKind.CACHE: ("Library", "Caches"),
    DirKind.CONFIG: ("Library", "Preferences"),
    DirKind.DATA: ("Library",),
}
_UNIX_SEGMENTS = {
    DirKind.CACHE: (".cache",),
    DirKind.CONFIG: (".config",),
    DirKind.DATA: (".local", "share"),
}


class ResolvedPaths(NamedTuple):
    """Cache, config and data paths computed together for one application."""

    cache: Path
    config: Path
    data: Path

    def of(self, kind: DirKind) -> Path:
        return getattr(self, kind.value)


def _base(env: EnvLookup, name: str) -> Path:
    value = env(name)
    return Path(value if value is not None else ".")


def resolve_kind(kind: DirKind, app_name: str, platform: str, env: EnvLookup = os.environ.get) -> Path:
    """Resolve a single directory kind. An override always wins over the platform default."""
    override = env(OVERRIDE_VARS[kind])
    if override is not None:
        return Path(override) / app_name
    if platform == Platform.WINDOWS:
        return _base(env, "APPDATA") / app_name / _WINDOWS_SEGMENTS[kind]
    if platform == Platform.MACOS:
        return _base(env, "HOME").joinpath(*_MACOS_SEGMENTS[kind], app_name)
    return _base(env, "HOME").joinpath(*_UNIX_SEGMENTS[kind], app_name)


def resolve(app_name: str, platform: str, env: EnvLookup = os.environ.get) -> ResolvedPaths:
    """Resolve all three directories for app_name.

    Args:
        app_name: Application name, used as the per-app subfolder
        platform: Platform identifier ("windows", "macos", or anything else for Unix-like)
        env: Environment lookup returning None for unset variables (defaults to os.environ.get)

    Returns:
        ResolvedPaths with cache, config and data paths
    """
    return ResolvedPaths(*(resolve_kind(kind, app_name, platform, env) for kind in DirKind))
