"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements file hashing utilities using the File class and pluggable hash algorithms.

HasherImpl streams whole files through an incremental hash object with a bounded
buffer, and hashes fixed windows for the partial checksum. Read errors are raised
to the caller, never turned into a placeholder digest.
"""

import xxhash
from dupescan.core.models import File
from dupescan.core.config import ComparisonConfig
from dupescan.core.interfaces import Hasher, HashAlgorithm


# Use the same way to implement and use any other hashing algorithm
class XXHashAlgorithmImpl(HashAlgorithm):
    """128-bit xxHash3, non-cryptographic."""

    @staticmethod
    def hash(data: bytes) -> bytes:
        return xxhash.xxh3_128(data).digest()

    @staticmethod
    def new():
        return xxhash.xxh3_128()


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    Memory use is bounded by buffer_size (full hash) or by the window length.
    """

    def __init__(self, algorithm: HashAlgorithm = None, buffer_size: int = ComparisonConfig.READ_BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError("Buffer size must be positive")
        self.algorithm = algorithm or XXHashAlgorithmImpl()
        self.buffer_size = buffer_size

    def compute_full_hash(self, file: File) -> bytes:
        """Digest of the whole file, read sequentially."""
        digest = self.algorithm.new()
        with open(file.path, 'rb') as f:
            for chunk in iter(lambda: f.read(self.buffer_size), b''):
                digest.update(chunk)
        return digest.digest()

    def compute_window_hash(self, file: File, offset: int, length: int) -> bytes:
        """Digest of `length` bytes starting at `offset` (fewer if the file ends first)."""
        digest = self.algorithm.new()
        remaining = length
        with open(file.path, 'rb') as f:
            f.seek(offset)
            while remaining > 0:
                chunk = f.read(min(self.buffer_size, remaining))
                if not chunk:
                    break
                digest.update(chunk)
                remaining -= len(chunk)
        return digest.digest()
