"""Concrete storage providers: a local directory and a prefix-based URL builder."""

from __future__ import annotations

import io
import os
import shutil
from typing import BinaryIO

from corekit.storage.base import LocalStorageProvider, UrlProvider


class NoUrlProvider(UrlProvider):
    """Builds URLs by putting a fixed prefix in front of the path."""

    def __init__(self, prefix: str = "") -> None:
        self.prefix = prefix

    def get_public_url(self, path: str) -> str:
        """The prefix followed by the path."""
        return self.prefix + path


NO_URL_PROVIDER = NoUrlProvider("")


class OsProvider(LocalStorageProvider):
    """Keeps files below a directory of the local filesystem."""

    def __init__(self, directory: str | os.PathLike) -> None:
        self.directory = os.fspath(directory)

    def _full_path(self, path: str) -> str:
        parts = [part for part in (self.directory, path) if part]
        if not parts:
            return ""
        return os.path.normpath("/".join(parts))

    def file_exists(self, path: str) -> bool:
        """Whether anything exists at ``path``; other stat failures are raised."""
        try:
            os.stat(self._full_path(path))
        except FileNotFoundError:
            return False
        return True

    def delete_file(self, path: str) -> None:
        """Remove the file at ``path``."""
        os.remove(self._full_path(path))

    def delete_dir(self, path: str) -> None:
        """Remove ``path`` and everything below it; a missing path is not an error."""
        full_path = self._full_path(path)
        if os.path.isdir(full_path) and not os.path.islink(full_path):
            shutil.rmtree(full_path)
            return
        try:
            os.remove(full_path)
        except FileNotFoundError:
            pass

    def write(self, path: str, file: BinaryIO) -> None:
        """Store the stream at ``path``, creating parent directories as needed."""
        full_path = self._full_path(path)
        dir_name = os.path.dirname(full_path) or "."

        try:
            os.makedirs(dir_name, exist_ok=True)
        except OSError as err:
            raise OSError(f"create dir {dir_name} for file {path}: {err}") from err

        try:
            dest = open(full_path, "wb")
        except OSError as err:
            raise OSError(f"create file {path}: {err}") from err

        with dest:
            try:
                shutil.copyfileobj(file, dest)
            except OSError as err:
                raise OSError(f"copy file to '{full_path}': {err}") from err

    def read_file(self, path: str) -> BinaryIO:
        """Open the file at ``path`` for binary reading."""
        return open(self._full_path(path), "rb")

    def compose(self, path: str, chunks: list[str]) -> None:
        """Unsupported for local files; always raises ``io.UnsupportedOperation``."""
        raise io.UnsupportedOperation("compose is unsupported by the filesystem provider")

    def close(self) -> None:
        """Nothing to release."""

    def local_path(self, path: str) -> str:
        """The filesystem path that backs ``path``."""
        return self._full_path(path)