"""
Store directory accessor.

The filesystem is the only source of truth: nothing about stored files is
kept in memory, every call goes to the directory again.
"""

import logging
import shutil
from pathlib import Path
from typing import BinaryIO, List, Union

from uploader.errors import FilesystemError, StartupError
from uploader.filenames import sanitize_filename

logger = logging.getLogger(__name__)

COPY_BUFFER_SIZE = 1024 * 1024


class StoreDirectory:
    """Lists and writes files directly under one directory."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"StoreDirectory({str(self.path)!r})"

    def ensure_exists(self) -> None:
        """Create the directory (and parents) if it is missing."""
        if self.path.is_dir():
            return
        try:
            self.path.mkdir(mode=0o755, parents=True, exist_ok=True)
        except OSError as e:
            raise StartupError(f"cannot create store directory {self.path}: {e}") from e
        logger.info(f"Created store directory {self.path}")

    def list_entries(self) -> List[str]:
        """
        Names of the files and subdirectories directly under the store.

        A directory that cannot be read is logged and reported as empty.
        """
        try:
            names = [entry.name for entry in self.path.iterdir()]
        except OSError as e:
            logger.warning(f"could not read store directory {self.path}: {e}")
            return []
        return sorted(names)

    def destination(self, filename: str) -> Path:
        """Sanitize ``filename`` and join it with the store directory."""
        return self.path / sanitize_filename(filename)

    def write(self, filename: str, source: BinaryIO) -> Path:
        """
        Copy ``source`` into the store under the sanitized ``filename``.

        An existing file of the same name is truncated and overwritten.
        The destination is closed on every path; closing ``source`` is the
        caller's job.

        :raises InvalidFilename: If the name sanitizes to nothing.
        :raises FilesystemError: If the file cannot be created or written.
        """
        dest_path = self.destination(filename)
        try:
            with open(dest_path, "wb") as dst:
                shutil.copyfileobj(source, dst, COPY_BUFFER_SIZE)
        except OSError as e:
            raise FilesystemError(f"cannot write {dest_path.name}: {e}") from e
        logger.info(f"Stored {dest_path.name} in {self.path}")
        return dest_path
