"""
Core duplicate detection engine — scanner, filters, hashing, comparator and grouper.

This package contains the comparison and grouping logic of dupescan:
- FileScannerImpl: directory traversal with size-spec and name-regex filters
- HasherImpl + XXHashAlgorithmImpl: streaming xxHash3-128 content digests
- MetadataCache: per-run memoization of lengths and digests
- PartialChecksum: first/last window fingerprint for very large files
- ByteStreamEqual: bounded-buffer byte-by-byte comparison
- ComparatorImpl: precision tiers (length, checksum, byte-exact)
- DuplicateGrouper: single-pass grouping with a claimed set
- Models: File, DuplicateGroup, Precision, ScanParams, ScanStats

All components are pure Python with no UI dependencies.
"""

from .models import (
    File, FileMetadata, DuplicateGroup, Precision, ScanParams, ScanStats)
from .config import ComparisonConfig
from .filters import SizeSpec, NameFilter, parse_size_spec
from .hasher import HasherImpl, XXHashAlgorithmImpl
from .cache import MetadataCache
from .partial import PartialChecksum
from .byte_compare import ByteStreamEqual
from .comparator import ComparatorImpl
from .grouper import DuplicateGrouper
from .scanner import FileScannerImpl

__all__ = [
    "File",
    "FileMetadata",
    "DuplicateGroup",
    "Precision",
    "ScanParams",
    "ScanStats",
    "ComparisonConfig",
    "SizeSpec",
    "NameFilter",
    "parse_size_spec",
    "HasherImpl",
    "XXHashAlgorithmImpl",
    "MetadataCache",
    "PartialChecksum",
    "ByteStreamEqual",
    "ComparatorImpl",
    "DuplicateGrouper",
    "FileScannerImpl",
]
