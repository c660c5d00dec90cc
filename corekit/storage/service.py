"""Storage front end that wraps provider failures with the operation that failed."""

from __future__ import annotations

import shutil
from contextlib import contextmanager
from typing import BinaryIO, Iterator

from corekit.storage.base import LocalStorageProvider, Provider, UrlProvider


class StorageError(Exception):
    """A storage operation failed; ``__cause__`` holds the underlying error."""


@contextmanager
def _wrapped(operation: str) -> Iterator[None]:
    try:
        yield
    except Exception as err:
        raise StorageError(f"{operation}: {err}") from err


class Storage:
    """Reads and writes files through a provider and builds public URLs."""

    def __init__(self, provider: Provider, url_provider: UrlProvider) -> None:
        self.provider = provider
        self.url_provider = url_provider

    def __enter__(self) -> Storage:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def file_exists(self, path: str) -> bool:
        """Whether a file exists at ``path``."""
        with _wrapped(f"storage.FileExists({path})"):
            return self.provider.file_exists(path)

    def delete_file(self, path: str) -> None:
        """Remove the file at ``path``."""
        with _wrapped(f"storage.DeleteFile({path})"):
            self.provider.delete_file(path)

    def delete_dir(self, path: str) -> None:
        """Remove the directory at ``path`` recursively."""
        with _wrapped(f"storage.DeleteDir({path})"):
            self.provider.delete_dir(path)

    def write(self, path: str, file: BinaryIO) -> None:
        """Store the contents of a binary stream at ``path``."""
        with _wrapped(f"storage.Write({path})"):
            self.provider.write(path, file)

    def write_file(self, path: str, filename: str) -> None:
        """Store the contents of the local file ``filename`` at ``path``."""
        try:
            source = open(filename, "rb")
        except OSError as err:
            raise StorageError(f"could not open file '{filename}': {err}") from err

        with source, _wrapped(f"storage.WriteFile({path}, {filename})"):
            self.provider.write(path, source)

    def read_file(self, path: str) -> BinaryIO:
        """Open the file at ``path`` for reading; the caller closes it."""
        with _wrapped(f"storage.ReadFile({path})"):
            return self.provider.read_file(path)

    def download_file(self, path: str, filename: str) -> None:
        """Copy the file at ``path`` into the local file ``filename``."""
        with _wrapped(f"storage.DownloadFile({path})"):
            source = self.provider.read_file(path)

        with source:
            try:
                dest = open(filename, "wb")
            except OSError as err:
                raise StorageError(
                    f"storage.DownloadFile({path}): failed to open file {filename}: {err}"
                ) from err

            with dest:
                try:
                    shutil.copyfileobj(source, dest)
                except OSError as err:
                    raise StorageError(
                        f"storage.DownloadFile({path}): failed to copy file {path} to {filename}: {err}"
                    ) from err

    def compose(self, path: str, chunks: list[str]) -> None:
        """Concatenate the files named by ``chunks`` into ``path``."""
        with _wrapped(f"storage.Compose({path}, [{' '.join(chunks)}])"):
            self.provider.compose(path, chunks)

    def get_public_url(self, path: str) -> str:
        """The public URL of ``path``."""
        with _wrapped(f"storage.GetPublicUrl({path})"):
            return self.url_provider.get_public_url(path)

    def close(self) -> None:
        """Close the provider."""
        with _wrapped("storage.Close()"):
            self.provider.close()


class LocalStorage(Storage):
    """Storage whose files can also be reached on the local filesystem."""

    provider: LocalStorageProvider

    def __init__(self, provider: LocalStorageProvider, url_provider: UrlProvider) -> None:
        super().__init__(provider, url_provider)

    def local_path(self, path: str) -> str:
        """The filesystem path that backs ``path``."""
        with _wrapped(f"local_storage.LocalPath({path})"):
            return self.provider.local_path(path)