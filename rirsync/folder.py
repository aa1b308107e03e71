"""A directory on disk with helpers for reading, writing and cleaning it."""

from __future__ import annotations

import os
import shutil
from datetime import datetime, timezone
from typing import BinaryIO


class Folder:
    """A directory that is created on construction if it does not exist."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = os.fspath(path)
        os.makedirs(self._path, mode=0o755, exist_ok=True)

    @property
    def path(self) -> str:
        """The directory's path."""
        return self._path

    def __repr__(self) -> str:
        return f"Folder({self._path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Folder):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)

    def remove(self) -> None:
        """Delete the directory and everything in it; a missing directory is fine."""
        try:
            shutil.rmtree(self._path)
        except FileNotFoundError:
            pass

    def clear(self) -> None:
        """Delete everything inside the directory but keep the directory itself."""
        with os.scandir(self._path) as entries:
            for entry in list(entries):
                if entry.is_dir(follow_symlinks=False):
                    shutil.rmtree(entry.path)
                else:
                    os.remove(entry.path)

    def exists(self, name: str) -> bool:
        """Whether ``name`` exists inside the directory."""
        return os.path.exists(self.get_path(name))

    def last_modified(self, name: str) -> datetime:
        """Modification time of ``name``; raises ``OSError`` if it cannot be read."""
        return datetime.fromtimestamp(os.stat(self.get_path(name)).st_mtime, tz=timezone.utc)

    def subfolder(self, name: str) -> Folder:
        """Return (creating if needed) the folder ``name`` inside this one."""
        return Folder(self.get_path(name))

    def get_path(self, name: str) -> str:
        """Path of ``name`` inside the directory."""
        return os.path.join(self._path, name)

    def get_content(self, name: str) -> bytes:
        """Read the whole of file ``name``."""
        with open(self.get_path(name), "rb") as handle:
            return handle.read()

    def open(self, name: str) -> BinaryIO:
        """Open file ``name`` for binary reading."""
        return open(self.get_path(name), "rb")

    def put_content(self, name: str, content: bytes) -> None:
        """Write ``content`` to file ``name``, replacing what was there."""
        with open(self.get_path(name), "wb") as handle:
            handle.write(content)

    def put_content_from(self, name: str, stream: BinaryIO) -> None:
        """Copy everything readable from ``stream`` into file ``name``."""
        with open(self.get_path(name), "wb") as handle:
            shutil.copyfileobj(stream, handle)