"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate finder.
These protocols enforce structural typing using Python's `typing.Protocol` so that
implementations can be swapped (e.g. another hash algorithm, a fake comparator in tests).

Key Components:
---------------
- HashAlgorithm: Standardized interface for hash functions (xxHash, MD5, ...).
- Hasher: Interface for computing full-content and window digests of files.
- Comparator: Interface deciding whether two files are identical under a precision.
- FileScanner: Interface for scanning directories and returning the eligible files.
"""

from typing import Protocol, List, Any
from dupescan.core.models import File, Precision


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like SHA-256, MD5, or xxHash
    without affecting the rest of the comparison logic.
    """

    @staticmethod
    def hash(data: bytes) -> bytes:
        """Computes the hash of the provided byte data."""
        ...

    @staticmethod
    def new() -> Any:
        """Returns an incremental hash object exposing update() and digest()."""
        ...


class Hasher(Protocol):
    """Interface for hashing a whole file or a window of it."""
    def compute_full_hash(self, file: File) -> bytes: ...
    def compute_window_hash(self, file: File, offset: int, length: int) -> bytes: ...


class Comparator(Protocol):
    """Decides whether two files hold equal content under the given precision."""
    def identical(self, file_a: File, file_b: File, precision: Precision) -> bool: ...


class FileScanner(Protocol):
    """
    Interface for scanning file systems and collecting eligible files.

    Methods:
        scan: Returns the filtered files in traversal order.
    """
    def scan(self) -> List[File]: ...
