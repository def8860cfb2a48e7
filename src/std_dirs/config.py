"""Per-application standard directories and their lifecycle.

Provides the Config dataclass, which resolves cache/config/data directories for
an application name and creates or removes all of them.

Precedence per directory: XDG override variable > platform default.
Create and remove are fail-fast: directories are processed in the order
cache -> config -> data and the first failure raises a classified error
(CacheCreateFailed, ConfigRemoveFailed, ...), leaving later directories untouched.
"""

import os
from collections.abc import Iterator
from dataclasses import dataclass, field

from loguru import logger

from .directory import Directory
from .errors import CreateError, RemoveError
from .platforms import current_platform
from .resolver import DirKind, EnvLookup, ResolvedPaths, resolve


@dataclass(frozen=True)
class Config:
    """Standard directories for one application.

    The expected paths for an app called "do-stuff":

    * cache: $XDG_CACHE_HOME/do-stuff, else %APPDATA%/do-stuff/Cache (windows),
      $HOME/Library/Caches/do-stuff (macos), $HOME/.cache/do-stuff
    * config: $XDG_CONFIG_HOME/do-stuff, else %APPDATA%/do-stuff/Config (windows),
      $HOME/Library/Preferences/do-stuff (macos), $HOME/.config/do-stuff
    * data: $XDG_DATA_HOME/do-stuff, else %APPDATA%/do-stuff/Data (windows),
      $HOME/Library/do-stuff (macos), $HOME/.local/share/do-stuff
    """

    app_name: str
    platform: str | None = None
    env: EnvLookup | None = field(default=None, repr=False, compare=False)
    paths: ResolvedPaths = field(init=False)

    def __post_init__(self):
        # Frozen: fill defaults and the resolved paths once, at construction
        if self.platform is None:
            object.__setattr__(self, "platform", current_platform())
        if self.env is None:
            object.__setattr__(self, "env", os.environ.get)
        object.__setattr__(self, "paths", resolve(self.app_name, self.platform, self.env))
        logger.debug(f"{self.app_name}: resolved {self.platform} directories {self.paths}")

    @property
    def cache(self) -> Directory:
        """Directory for disposable cached files."""
        return Directory(self.paths.cache)

    @property
    def config(self) -> Directory:
        """Directory for user configuration."""
        return Directory(self.paths.config)

    @property
    def data(self) -> Directory:
        """Directory for persistent application data."""
        return Directory(self.paths.data)

    def directories(self) -> Iterator[tuple[DirKind, Directory]]:
        """Yield (kind, directory) pairs in processing order."""
        for kind in DirKind:
            yield kind, Directory(self.paths.of(kind))

    def create_all(self) -> None:
        """Create all directories, stopping at the first failure.

        Raises:
            CreateError: CacheCreateFailed, ConfigCreateFailed or DataCreateFailed,
                with the underlying OSError as __cause__
        """
        for kind, directory in self.directories():
            logger.debug(f"{self.app_name}: creating {kind} directory {directory}")
            try:
                directory.create()
            except OSError as e:
                logger.error(f"{self.app_name}: could not create {kind} directory {directory}: {e}")
                raise CreateError.for_kind(kind, directory.path) from e

    def remove_all(self) -> None:
        """Remove all directories recursively, stopping at the first failure.

        Raises:
            RemoveError: CacheRemoveFailed, ConfigRemoveFailed or DataRemoveFailed,
                with the underlying OSError as __cause__
        """
        for kind, directory in self.directories():
            logger.debug(f"{self.app_name}: removing {kind} directory {directory}")
            try:
                directory.remove()
            except OSError as e:
                logger.error(f"{self.app_name}: could not remove {kind} directory {directory}: {e}")
                raise RemoveError.for_kind(kind, directory.path) from e

    async def create_all_async(self) -> None:
        """Async create_all. Directories are still processed one at a time, in order."""
        for kind, directory in self.directories():
            logger.debug(f"{self.app_name}: creating {kind} directory {directory}")
            try:
                await directory.create_async()
            except OSError as e:
                logger.error(f"{self.app_name}: could not create {kind} directory {directory}: {e}")
                raise CreateError.for_kind(kind, directory.path) from e

    async def remove_all_async(self) -> None:
        """Async remove_all. Directories are still processed one at a time, in order."""
        for kind, directory in self.directories():
            logger.debug(f"{self.app_name}: removing {kind} directory {directory}")
            try:
                await directory.remove_async()
            except OSError as e:
                logger.error(f"{self.app_name}: could not remove {kind} directory {directory}: {e}")
                raise RemoveError.for_kind(kind, directory.path) from e
