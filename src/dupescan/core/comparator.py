"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/comparator.py
Decides whether two files are identical under a precision level.

    - LENGTH_ONLY:       length
    - CHECKSUM_ASSISTED: length → partial checksum (large files only) → full checksum
    - BYTE_EXACT:        length → byte-by-byte comparison
"""

from typing import Optional

from dupescan.core.byte_compare import ByteStreamEqual
from dupescan.core.cache import MetadataCache
from dupescan.core.interfaces import Comparator
from dupescan.core.models import File, Precision
from dupescan.core.partial import PartialChecksum


class ComparatorImpl(Comparator):
    """
    Runs the checks of a precision tier from cheapest to most expensive,
    returning False as soon as one fails. Length mismatches never touch content.
    """

    def __init__(
            self,
            cache: Optional[MetadataCache] = None,
            partial: Optional[PartialChecksum] = None,
            byte_compare: Optional[ByteStreamEqual] = None,
    ):
        self.cache = cache if cache is not None else MetadataCache()
        self.partial = partial or PartialChecksum(self.cache)
        self.byte_compare = byte_compare or ByteStreamEqual()

    def identical(self, file_a: File, file_b: File, precision: Precision) -> bool:
        if not isinstance(precision, Precision):
            raise ValueError(f"Invalid precision: {precision!r}")

        if self.cache.length(file_a) != self.cache.length(file_b):
            return False
        if file_a.key == file_b.key:
            return True

        if precision == Precision.LENGTH_ONLY:
            return True
        if precision == Precision.CHECKSUM_ASSISTED:
            return self._identical_by_checksum(file_a, file_b)
        return self.byte_compare.equal(file_a, file_b)

    def _identical_by_checksum(self, file_a: File, file_b: File) -> bool:
        # The partial check can only reject; the full checksum always decides
        if self.partial.applies(file_a, file_b) and not self.partial.partial_equal(file_a, file_b):
            return False
        return self.cache.checksum(file_a) == self.cache.checksum(file_b)
