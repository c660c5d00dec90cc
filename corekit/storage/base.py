"""Interfaces implemented by storage back ends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO


class Provider(ABC):
    """A place where files are written, read and removed by path."""

    @abstractmethod
    def file_exists(self, path: str) -> bool:
        """Whether a file exists at ``path``."""

    @abstractmethod
    def delete_file(self, path: str) -> None:
        """Remove the file at ``path``."""

    @abstractmethod
    def delete_dir(self, path: str) -> None:
        """Remove the directory at ``path`` with everything below it."""

    @abstractmethod
    def write(self, path: str, file: BinaryIO) -> None:
        """Store the contents of a readable binary stream at ``path``."""

    @abstractmethod
    def read_file(self, path: str) -> BinaryIO:
        """Open the file at ``path`` for reading; the caller closes it."""

    @abstractmethod
    def compose(self, path: str, chunks: list[str]) -> None:
        """Concatenate the files named by ``chunks`` into ``path``."""

    @abstractmethod
    def close(self) -> None:
        """Release any resources held by the provider."""


class UrlProvider(ABC):
    """Turns a storage path into a publicly reachable URL."""

    @abstractmethod
    def get_public_url(self, path: str) -> str:
        """The public URL of ``path``."""


class LocalStorageProvider(Provider):
    """A provider whose files also live on the local filesystem."""

    @abstractmethod
    def local_path(self, path: str) -> str:
        """The filesystem path that backs ``path``."""