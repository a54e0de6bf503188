"""
Command orchestrator for one duplicate scan.
This is the single place where scanner, cache, comparator and grouper are wired together.
"""
import time
from typing import List, Optional, Callable, Tuple

from dupescan.core.cache import MetadataCache
from dupescan.core.comparator import ComparatorImpl
from dupescan.core.grouper import DuplicateGrouper
from dupescan.core.models import DuplicateGroup, File, ScanParams, ScanStats
from dupescan.core.scanner import FileScannerImpl


class ScanCommand:
    """
    Orchestrates the whole workflow:
    1. Scan the root directory with the configured filters
    2. Build a fresh MetadataCache and comparator for this run
    3. Group the scanned files under the chosen precision

    Usage:
        params = ScanParams.from_cli_values("/data", size_str="+1M", precision=1)
        groups, stats = ScanCommand().execute(params)
    """

    def __init__(self):
        self._files: List[File] = []

    def scan(
            self,
            params: ScanParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None,
    ) -> List[File]:
        """Step 1 only: returns the eligible files and keeps them for execute()."""
        scanner = FileScannerImpl(
            root_dir=params.root_dir,
            recurse=params.recurse,
            size_spec=params.size_spec,
            name_filter=params.name_filter,
        )
        self._files = scanner.scan(progress_callback=progress_callback)
        return self.get_files()

    def execute(
            self,
            params: ScanParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None,
            files: Optional[List[File]] = None,
    ) -> Tuple[List[DuplicateGroup], ScanStats]:
        """
        Run a scan with the given parameters.

        Args:
            params: Validated scan parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None
            files: Already scanned files; when None the directory is scanned first

        Returns:
            Tuple of (duplicate_groups, statistics)

        Raises:
            RuntimeError: If the directory cannot be scanned or a file cannot be read
        """
        stats = ScanStats()
        total_start_time = time.time()

        if files is None:
            start_time = time.time()
            self.scan(params, progress_callback=progress_callback)
            stats.update_stage("scan", 0, len(self._files), time.time() - start_time)
        else:
            self._files = list(files)
        stats.files_examined = len(self._files)

        cache = MetadataCache()
        grouper = DuplicateGrouper(ComparatorImpl(cache), stats=stats)

        start_time = time.time()
        try:
            groups = grouper.group(self._files, params.precision, progress_callback=progress_callback)
        except OSError as e:
            raise RuntimeError(f"Cannot read {e.filename or 'file'}: {e.strerror or e}") from e
        stats.update_stage(
            "grouping",
            groups_found=len(groups),
            files_processed=sum(len(g.files) for g in groups),
            duration=time.time() - start_time,
        )

        stats.total_time = time.time() - total_start_time
        return groups, stats

    def get_files(self) -> List[File]:
        """Get scanned files after execution."""
        return self._files.copy()
