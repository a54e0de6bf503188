"""
dupescan — find groups of duplicate files in a directory.

Core features:
- Three precision levels: length only, length + checksum, byte-by-byte
- Partial checksum shortcut for very large files
- Size and file name regex filters
- Reports only; never modifies or deletes files
"""

from importlib.metadata import version as _version, PackageNotFoundError

try:
    __version__ = _version("dupescan")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from dupescan.commands import ScanCommand
from dupescan.core import (
    ScanParams, ScanStats, Precision, File, DuplicateGroup,
    ComparatorImpl, DuplicateGrouper, MetadataCache)
from dupescan.utils.convert_utils import ConvertUtils

__all__ = [
    "ScanCommand",
    "ScanParams",
    "ScanStats",
    "Precision",
    "File",
    "DuplicateGroup",
    "ComparatorImpl",
    "DuplicateGrouper",
    "MetadataCache",
    "ConvertUtils",
    "__version__",
]
