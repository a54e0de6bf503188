"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/cache.py
Per-run memoization of file lengths and digests.

One MetadataCache is created per scan and handed to every component that needs
file metadata. Each value is computed at most once per file and kept until the
cache is discarded; files are assumed not to change during a scan.
The cache is not thread-safe. A parallel caller must guard population per key.
"""

import os
import logging
from typing import Callable, Dict, Optional, Tuple, TypeVar

from dupescan.core.models import File, FileMetadata
from dupescan.core.hasher import HasherImpl
from dupescan.core.interfaces import Hasher

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MetadataCache:
    """
    Lazily computes and memoizes length, full checksum and window digests per file.
    I/O errors propagate and leave the entry empty, so a later call retries.
    """

    def __init__(self, hasher: Optional[Hasher] = None):
        self.hasher = hasher or HasherImpl()
        self._entries: Dict[str, FileMetadata] = {}

    def length(self, file: File) -> int:
        """File length in bytes; uses the scanner's size when it has one."""
        return self._memoized(file, "length", self._read_length)

    def checksum(self, file: File) -> bytes:
        """Digest of the full file content."""
        return self._memoized(file, "checksum", self.hasher.compute_full_hash)

    def partial(
            self,
            file: File,
            window_size: int,
            compute: Callable[[File], Tuple[bytes, bytes]]
    ) -> Tuple[bytes, bytes]:
        """(front, end) window digests for one window size, computed by the caller-supplied function."""
        entry = self._entries.get(file.key)
        if entry is not None and window_size in entry.partial:
            return entry.partial[window_size]

        value = compute(file)

        entry = self._entries.setdefault(file.key, FileMetadata())
        entry.partial[window_size] = value
        logger.debug(f"Cached {window_size}-byte window digests for {file.path}")
        return value

    def entry(self, file: File) -> Optional[FileMetadata]:
        """The cached metadata for a file, or None if nothing was computed yet."""
        return self._entries.get(file.key)

    def __len__(self) -> int:
        return len(self._entries)

    def _memoized(self, file: File, field_name: str, compute: Callable[[File], T]) -> T:
        entry = self._entries.get(file.key)
        if entry is not None:
            value = getattr(entry, field_name)
            if value is not None:
                return value

        value = compute(file)  # raises OSError on unreadable files

        if entry is None:
            entry = self._entries.setdefault(file.key, FileMetadata())
        setattr(entry, field_name, value)
        logger.debug(f"Cached {field_name} for {file.path}")
        return value

    @staticmethod
    def _read_length(file: File) -> int:
        if file.size is not None:
            return file.size
        return os.stat(file.path).st_size
