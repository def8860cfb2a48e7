"""Classified errors for directory lifecycle operations.

Each error names exactly one directory kind and one action. The underlying
OSError is attached as __cause__ when raised by Config.
"""

from pathlib import Path

from .resolver import DirKind


class DirectoryError(Exception):
    """A create or remove operation failed for one directory."""

    action = "access"
    kind: DirKind

    def __init__(self, path: Path) -> None:
        super().__init__(f"Failed to {self.action} {self.kind} directory: {path}")
        self.path = path


class CreateError(DirectoryError):
    action = "create"

    @staticmethod
    def for_kind(kind: DirKind, path: Path) -> "CreateError":
        return _CREATE_ERRORS[kind](path)


class RemoveError(DirectoryError):
    action = "remove"

    @staticmethod
    def for_kind(kind: DirKind, path: Path) -> "RemoveError":
        return _REMOVE_ERRORS[kind](path)


class CacheCreateFailed(CreateError):
    kind = DirKind.CACHE


class ConfigCreateFailed(CreateError):
    kind = DirKind.CONFIG


class DataCreateFailed(CreateError):
    kind = DirKind.DATA


class CacheRemoveFailed(RemoveError):
    kind = DirKind.CACHE


class ConfigRemoveFailed(RemoveError):
    kind = DirKind.CONFIG


class DataRemoveFailed(RemoveError):
    kind = DirKind.DATA


_CREATE_ERRORS: dict[DirKind, type[CreateError]] = {
    DirKind.CACHE: CacheCreateFailed,
    DirKind.CONFIG: ConfigCreateFailed,
    DirKind.DATA: DataCreateFailed,
}
_REMOVE_ERRORS: dict[DirKind, type[RemoveError]] = {
    DirKind.CACHE: CacheRemoveFailed,
    DirKind.CONFIG: ConfigRemoveFailed,
    DirKind.DATA: DataRemoveFailed,
}
