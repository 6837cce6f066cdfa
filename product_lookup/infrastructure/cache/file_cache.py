import asyncio
import os
import tempfile
from pathlib import Path
from typing import Optional

from product_lookup.adapters.interfaces.cache import CacheBackend
from product_lookup.core.exceptions import CacheLookupError, CacheWriteError
from product_lookup.core.logging import get_logger

logger = get_logger(__name__)


class FileCache(CacheBackend):
    """
    Local-directory implementation of the CacheBackend interface.

    One file per key, named exactly as the key, holding the serialized
    record. Files are replaced atomically so readers never observe a
    partially written document.
    """

    def __init__(self, directory: str):
        """
        Initialize the file cache.

        Args:
            directory: Directory holding the cached records
        """
        self.directory = Path(directory)

    def describe(self) -> str:
        return f"file ({self.directory})"

    def path_for(self, key: str) -> Optional[Path]:
        """
        Resolve the file holding a key.

        Returns None when the key cannot name a single file inside the cache
        directory.
        """
        if not key or key in (".", "..") or "\x00" in key:
            return None
        if "/" in key or (os.sep != "/" and os.sep in key):
            return None
        if os.altsep and os.altsep in key:
            return None
        return self.directory / key

    async def get(self, key: str) -> Optional[bytes]:
        """
        Read a record from disk.

        Args:
            key: Item id

        Returns:
            File contents or None if no file exists for the key

        Raises:
            CacheLookupError: If the key is not a valid file name or the file
                cannot be read
        """
        path = self.path_for(key)
        if path is None:
            raise CacheLookupError(f"Invalid cache key for file cache: {key!r}", key=key)

        try:
            return await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError:
            logger.debug(f"Cache miss for key: {key}")
            return None
        except OSError as e:
            raise CacheLookupError(f"Failed to read cache file {path}: {str(e)}", key=key) from e

    async def put(self, key: str, value: bytes) -> None:
        """
        Write a record to disk, replacing any existing file.

        Args:
            key: Item id
            value: Serialized record

        Raises:
            CacheWriteError: If the key is not a valid file name or the file
                cannot be written
        """
        path = self.path_for(key)
        if path is None:
            raise CacheWriteError(f"Invalid cache key for file cache: {key!r}", key=key)

        try:
            await asyncio.to_thread(self._write_file, path, value)
        except OSError as e:
            raise CacheWriteError(f"Failed to write cache file {path}: {str(e)}", key=key) from e

        logger.debug(f"Stored cache file: {path}")

    def _write_file(self, path: Path, value: bytes) -> None:
        """Write through a temporary file in the cache directory, then rename."""
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=".tmp-")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(value)
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, path)
        except OSError:
            try:
                os.unlink(tmp_name)
            except OSError:
                logger.warning(f"Failed to remove temporary cache file {tmp_name}")
            raise
