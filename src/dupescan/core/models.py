"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for file scanning and duplicate detection.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Tuple, Union
import os
from enum import Enum


# =============================
# Enums
# =============================

class Precision(Enum):
    """
    Strictness tier controlling which checks must pass for two files
    to be reported as identical.
    """
    LENGTH_ONLY = 0
    CHECKSUM_ASSISTED = 1
    BYTE_EXACT = 2

    @property
    def display_name(self) -> str:
        """Human-readable name for output."""
        mapping = {
            Precision.LENGTH_ONLY: "Length only",
            Precision.CHECKSUM_ASSISTED: "Checksum",
            Precision.BYTE_EXACT: "Byte-by-byte",
        }
        return mapping.get(self, self.name)

    @property
    def description(self) -> str:
        """Detailed description for help text."""
        mapping = {
            Precision.LENGTH_ONLY:
                "Consider equal length files identical",
            Precision.CHECKSUM_ASSISTED:
                "Consider equal length files with equal checksums identical",
            Precision.BYTE_EXACT:
                "Consider byte-by-byte equal files identical",
        }
        return mapping.get(self, self.name)

    def __repr__(self) -> str:
        return str(self.value)


# ======================
#  Core Data Models
# ======================

@dataclass
class File:
    """
    Represents a single regular file on the file system.
    The core never writes to it; identity is its path.
    """
    path: str
    size: Optional[int] = None  # in bytes, as seen by the scanner
    name: Optional[str] = None

    def __post_init__(self):
        if self.name is None:
            self.name = os.path.basename(self.path)

    @property
    def key(self) -> str:
        """Identity used by caches and the claimed set."""
        return os.path.normpath(self.path)

    def __repr__(self):
        return f"<File path={self.path}, size={self.size}>"


@dataclass
class FileMetadata:
    """Lazily computed per-file values held by the metadata cache."""
    length: Optional[int] = None
    checksum: Optional[bytes] = None
    # window size -> (front, end) digests
    partial: Dict[int, Tuple[bytes, bytes]] = field(default_factory=dict)


@dataclass
class DuplicateGroup:
    """
    Files that are pairwise equal under the active precision.
    The first file is the anchor, the rest are its duplicates in discovery order.
    """
    files: List[File]

    @property
    def anchor(self) -> File:
        return self.files[0]

    @property
    def duplicates(self) -> List[File]:
        return self.files[1:]

    def __repr__(self):
        return f"<DuplicateGroup anchor={self.anchor.path}, count={len(self.files)}>"


class ScanStats:
    """
    Statistics collected during one scan.
    """
    def __init__(self):
        self.total_time: float = 0.0
        self.files_examined: int = 0
        self.comparisons: int = 0
        self.stage_stats: Dict[str, Dict[str, Union[int, float]]] = {}

    def update_stage(
            self,
            stage_name: str,
            groups_found: int,
            files_processed: int,
            duration: float
    ) -> None:
        if stage_name not in self.stage_stats:
            self.stage_stats[stage_name] = {
                "groups": 0,
                "files": 0,
                "time": 0.0
            }
        self.stage_stats[stage_name]["groups"] += groups_found
        self.stage_stats[stage_name]["files"] += files_processed
        self.stage_stats[stage_name]["time"] += duration

    def print_summary(self) -> str:
        labels = {
            "scan": "Scan",
            "grouping": "Grouping",
        }

        lines = [
            "Scan Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s",
            f"Files examined: {self.files_examined}",
            f"Comparisons: {self.comparisons}\n",
            "Stage: GROUPS / FILES / TIME"
        ]

        for stage, data in self.stage_stats.items():
            label = labels.get(stage.lower(), stage.title())
            lines.append(f"{label}: {data['groups']} / {data['files']} / {data['time']:.3f}s")

        return "\n".join(lines)


"""
DTO for scan parameters with built-in validation.
"""
from dupescan.core.filters import parse_size_spec, NameFilter, SizeSpec


@dataclass
class ScanParams:
    """Parameters for one scan with validation."""
    root_dir: str
    recurse: bool = False
    size_spec: Optional[SizeSpec] = None
    name_filter: Optional[NameFilter] = None
    precision: Precision = Precision.BYTE_EXACT

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if not isinstance(self.precision, Precision):
            raise ValueError(f"Invalid precision: {self.precision!r}")

    @staticmethod
    def from_cli_values(
            root_dir: str,
            size_str: Optional[str] = None,
            recurse: bool = False,
            regex: Optional[str] = None,
            invert_regex: bool = False,
            precision: int = Precision.BYTE_EXACT.value,
    ) -> 'ScanParams':
        """
        Factory method to create params from raw command-line values.
        invert_regex has no effect without a regex.
        Raises ValueError for a malformed size spec, regex or precision.
        """
        size_spec = parse_size_spec(size_str) if size_str is not None else None
        name_filter = NameFilter(regex, invert=invert_regex) if regex is not None else None

        try:
            precision_value = Precision(precision)
        except ValueError:
            raise ValueError("Precision must be between 0 and 2")

        return ScanParams(
            root_dir=root_dir,
            recurse=recurse,
            size_spec=size_spec,
            name_filter=name_filter,
            precision=precision_value,
        )
