"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Partitions an ordered file list into groups of identical files.
"""

import logging
from typing import Callable, List, Optional, Set

from dupescan.core.comparator import ComparatorImpl
from dupescan.core.interfaces import Comparator
from dupescan.core.models import DuplicateGroup, File, Precision, ScanStats

logger = logging.getLogger(__name__)


class DuplicateGrouper:
    """
    Single pass over the files in input order. Each unclaimed file becomes an
    anchor and is compared with every other unclaimed file; matches join the
    anchor's group and are claimed so they never anchor or join another group.

    Groups come out in the order of their anchors in the input, members in
    discovery order. Worst case (no duplicates) is O(n²) comparisons.
    """

    def __init__(self, comparator: Optional[Comparator] = None, stats: Optional[ScanStats] = None):
        self.comparator = comparator if comparator is not None else ComparatorImpl()
        self.stats = stats

    def group(
            self,
            files: List[File],
            precision: Precision,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> List[DuplicateGroup]:
        files = self._unique(files)
        claimed: Set[str] = set()
        groups: List[DuplicateGroup] = []
        total = len(files)

        for index, anchor in enumerate(files):
            if progress_callback:
                progress_callback("Grouping", index + 1, total)
            if anchor.key in claimed:
                continue
            claimed.add(anchor.key)

            matches = []
            for other in files:
                if other.key in claimed:
                    continue
                if self._identical(anchor, other, precision):
                    matches.append(other)
                    claimed.add(other.key)

            if matches:
                logger.debug(f"{anchor.path} has {len(matches)} duplicate(s)")
                groups.append(DuplicateGroup(files=[anchor] + matches))

        return groups

    def _identical(self, file_a: File, file_b: File, precision: Precision) -> bool:
        if self.stats is not None:
            self.stats.comparisons += 1
        return self.comparator.identical(file_a, file_b, precision)

    @staticmethod
    def _unique(files: List[File]) -> List[File]:
        """Drops repeated paths, keeping the first occurrence."""
        seen = set()
        result = []
        for file in files:
            if file.key not in seen:
                seen.add(file.key)
                result.append(file)
        return result
