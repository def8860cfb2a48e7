"""A single standard directory and its filesystem operations."""

import asyncio
import shutil
from pathlib import Path


class Directory:
    """One resolved directory path. Create and remove are idempotent."""

    def __init__(self, path: Path):
        self.path = path

    def __str__(self) -> str:
        return str(self.path)

    def __repr__(self) -> str:
        return f"Directory({str(self.path)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Directory):
            return self.path == other.path
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.path)

    def exists(self) -> bool:
        return self.path.is_dir()

    def create(self) -> None:
        """Create the directory and any missing parents. No-op if it already exists.

        Raises OSError if creation fails, including when a file occupies the path.
        """
        if not self.path.is_dir():
            self.path.mkdir(parents=True, exist_ok=True)

    def remove(self) -> None:
        """Recursively remove the directory. No-op if nothing is there.

        A symlink in place of the directory, dangling or not, is unlinked and its
        target left alone. Raises OSError if removal fails, including when a file
        occupies the path.
        """
        if self.path.is_symlink():
            self.path.unlink()
        elif self.path.exists():
            shutil.rmtree(self.path)

    async def create_async(self) -> None:
        await asyncio.to_thread(self.create)

    async def remove_async(self) -> None:
        await asyncio.to_thread(self.remove)
