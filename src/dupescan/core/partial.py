"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/partial.py
Cheap fingerprint for very large files: digests of the first and last window.

If two large files of identical length differ in their first or last few
megabytes, they are rejected without reading the rest. Equal fingerprints prove
nothing on their own; the full checksum still decides.
"""

from typing import Tuple

from dupescan.core.cache import MetadataCache
from dupescan.core.config import ComparisonConfig
from dupescan.core.models import File


class PartialChecksum:
    def __init__(
            self,
            cache: MetadataCache,
            threshold: int = ComparisonConfig.LARGE_FILE_THRESHOLD,
            window_size: int = ComparisonConfig.PARTIAL_WINDOW_SIZE,
    ):
        if window_size <= 0:
            raise ValueError("Window size must be positive")
        self.cache = cache
        self.threshold = threshold
        self.window_size = window_size

    def applies(self, file_a: File, file_b: File) -> bool:
        """True when both files have the same length and exceed the large-file threshold."""
        length_a = self.cache.length(file_a)
        return length_a > self.threshold and length_a == self.cache.length(file_b)

    def digests(self, file: File) -> Tuple[bytes, bytes]:
        """(front, end) window digests, memoized in the cache."""
        return self.cache.partial(file, self.window_size, self._compute)

    def partial_equal(self, file_a: File, file_b: File) -> bool:
        return self.digests(file_a) == self.digests(file_b)

    def _compute(self, file: File) -> Tuple[bytes, bytes]:
        length = self.cache.length(file)
        hasher = self.cache.hasher
        if length < 2 * self.window_size:
            # Windows would overlap: the whole file stands in for both
            whole = hasher.compute_window_hash(file, 0, length)
            return whole, whole
        front = hasher.compute_window_hash(file, 0, self.window_size)
        end = hasher.compute_window_hash(file, length - self.window_size, self.window_size)
        return front, end
