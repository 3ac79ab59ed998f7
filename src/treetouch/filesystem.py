"""Filesystem backends.

MemoryFileSystem keeps entries in a dictionary for the lifetime of the
process. RealFileSystem wraps pathlib operations. BasePathFileSystem rebases
another backend under one of its directories. All of them satisfy the
FileSystem protocol structurally.
"""

from __future__ import annotations

import errno
import io
import os
from dataclasses import replace
from pathlib import Path, PurePosixPath
from typing import BinaryIO

from treetouch.protocols import FileSystem
from treetouch.types import FileInfo

__all__ = [
    "DEFAULT_DIR_MODE",
    "BasePathFileSystem",
    "MemoryFileSystem",
    "RealFileSystem",
]

# Mode used for every directory created on a real filesystem
DEFAULT_DIR_MODE = 0o755

_Key = tuple[str, ...]


def _os_error(cls: type[OSError], code: int, path: str) -> OSError:
    return cls(code, os.strerror(code), path)


def _split(path: str) -> list[str]:
    """Split a path into components, dropping the root and "." segments."""
    return [part for part in PurePosixPath(path).parts if part not in ("/", ".")]


class _MemoryFile(io.BytesIO):
    """Writable buffer that stores its content back on flush and close."""

    def __init__(self, files: dict[_Key, bytes], key: _Key) -> None:
        super().__init__()
        self._files = files
        self._key = key

    def flush(self) -> None:
        if not self.closed:
            self._files[self._key] = self.getvalue()
        super().flush()

    def close(self) -> None:
        if not self.closed:
            self._files[self._key] = self.getvalue()
        super().close()


class MemoryFileSystem:
    """In-memory filesystem rooted at "/".

    Follows the same rules as an OS filesystem: files need an existing parent
    directory, entries are never silently replaced, and directories cannot be
    read as files.
    """

    def __init__(self) -> None:
        """Initialize an empty filesystem containing only the root."""
        self._files: dict[_Key, bytes] = {}
        self._dirs: set[_Key] = {()}

    def _key(self, path: str) -> _Key:
        parts: list[str] = []
        for part in _split(path):
            if part == "..":
                if parts:
                    parts.pop()
            else:
                parts.append(part)
        return tuple(parts)

    def _check_parent(self, key: _Key, path: str) -> None:
        parent = key[:-1]
        if parent in self._files:
            raise _os_error(NotADirectoryError, errno.ENOTDIR, path)
        if parent not in self._dirs:
            raise _os_error(FileNotFoundError, errno.ENOENT, path)

    def create(self, path: str) -> BinaryIO:
        """Create an empty file and open it for writing."""
        key = self._key(path)
        if key in self._dirs or key in self._files:
            raise _os_error(FileExistsError, errno.EEXIST, path)
        self._check_parent(key, path)
        self._files[key] = b""
        return _MemoryFile(self._files, key)

    def mkdir(self, path: str, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        key = self._key(path)
        if key in self._files:
            raise _os_error(FileExistsError, errno.EEXIST, path)
        if key in self._dirs:
            if exist_ok:
                return
            raise _os_error(FileExistsError, errno.EEXIST, path)

        if not parents:
            self._check_parent(key, path)
            self._dirs.add(key)
            return

        for depth in range(1, len(key) + 1):
            prefix = key[:depth]
            if prefix in self._files:
                raise _os_error(NotADirectoryError, errno.ENOTDIR, path)
            self._dirs.add(prefix)

    def stat(self, path: str) -> FileInfo:
        """Describe the entry at a path."""
        key = self._key(path)
        name = key[-1] if key else ""
        if key in self._dirs:
            return FileInfo(name=name, is_dir=True)
        if key in self._files:
            return FileInfo(name=name, is_dir=False, size=len(self._files[key]))
        raise _os_error(FileNotFoundError, errno.ENOENT, path)

    def exists(self, path: str) -> bool:
        """Check if a path exists."""
        key = self._key(path)
        return key in self._dirs or key in self._files

    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory."""
        return self._key(path) in self._dirs

    def read_bytes(self, path: str) -> bytes:
        """Read the content of a file."""
        key = self._key(path)
        if key in self._dirs:
            raise _os_error(IsADirectoryError, errno.EISDIR, path)
        try:
            return self._files[key]
        except KeyError:
            raise _os_error(FileNotFoundError, errno.ENOENT, path) from None

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read the content of a file as text."""
        return self.read_bytes(path).decode(encoding)

    def listdir(self, path: str) -> list[str]:
        """List the names of the entries in a directory."""
        key = self._key(path)
        if key in self._files:
            raise _os_error(NotADirectoryError, errno.ENOTDIR, path)
        if key not in self._dirs:
            raise _os_error(FileNotFoundError, errno.ENOENT, path)
        children = {
            entry[-1]
            for entry in (*self._dirs, *self._files)
            if len(entry) == len(key) + 1 and entry[:-1] == key
        }
        return sorted(children)


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library Path operations. Without a root, paths are
    interpreted as the operating system does (relative to the working
    directory). With a root, every path is taken relative to it.
    """

    def __init__(self, root: Path | str | None = None) -> None:
        """Initialize the filesystem.

        Args:
            root: Optional directory that paths are resolved against.
        """
        self.root = Path(root) if root is not None else None

    def _resolve(self, path: str) -> Path:
        if self.root is None:
            return Path(path)
        return self.root.joinpath(*_split(path))

    def create(self, path: str) -> BinaryIO:
        """Create an empty file and open it for writing."""
        return self._resolve(path).open("xb")

    def mkdir(self, path: str, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        self._resolve(path).mkdir(mode=DEFAULT_DIR_MODE, parents=parents, exist_ok=exist_ok)

    def stat(self, path: str) -> FileInfo:
        """Describe the entry at a path."""
        target = self._resolve(path)
        result = target.stat()
        is_dir = target.is_dir()
        return FileInfo(name=target.name, is_dir=is_dir, size=0 if is_dir else result.st_size)

    def exists(self, path: str) -> bool:
        """Check if a path exists."""
        return self._resolve(path).exists()

    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory."""
        return self._resolve(path).is_dir()

    def read_bytes(self, path: str) -> bytes:
        """Read the content of a file."""
        return self._resolve(path).read_bytes()

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read the content of a file as text."""
        return self._resolve(path).read_text(encoding=encoding)

    def listdir(self, path: str) -> list[str]:
        """List the names of the entries in a directory."""
        return sorted(child.name for child in self._resolve(path).iterdir())


class BasePathFileSystem:
    """View of another backend restricted to one of its directories.

    Every path is resolved relative to ``base`` within ``source``. Paths that
    would climb above ``base`` are rejected with PermissionError.
    """

    def __init__(self, source: FileSystem, base: str) -> None:
        """Initialize the view.

        Args:
            source: Backend to delegate to.
            base: Directory of ``source`` that becomes the new root.
        """
        self.source = source
        self.base = base

    def _relative(self, path: str) -> list[str]:
        parts: list[str] = []
        for part in _split(path):
            if part != "..":
                parts.append(part)
            elif parts:
                parts.pop()
            else:
                raise _os_error(PermissionError, errno.EPERM, path)
        return parts

    def _real(self, path: str) -> str:
        return str(PurePosixPath(self.base).joinpath(*self._relative(path)))

    def create(self, path: str) -> BinaryIO:
        """Create an empty file and open it for writing."""
        return self.source.create(self._real(path))

    def mkdir(self, path: str, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        self.source.mkdir(self._real(path), parents=parents, exist_ok=exist_ok)

    def stat(self, path: str) -> FileInfo:
        """Describe the entry at a path."""
        info = self.source.stat(self._real(path))
        if not self._relative(path):
            return replace(info, name="")
        return info

    def exists(self, path: str) -> bool:
        """Check if a path exists."""
        return self.source.exists(self._real(path))

    def is_dir(self, path: str) -> bool:
        """Check if a path is a directory."""
        return self.source.is_dir(self._real(path))

    def read_bytes(self, path: str) -> bytes:
        """Read the content of a file."""
        return self.source.read_bytes(self._real(path))

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read the content of a file as text."""
        return self.source.read_text(self._real(path), encoding=encoding)

    def listdir(self, path: str) -> list[str]:
        """List the names of the entries in a directory."""
        return self.source.listdir(self._real(path))
