"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements file scanning functionality using pathlib and os.walk.
Features:
- Scans a single directory or, with recurse, the whole tree
- Applies the size specification and file name regex filters
- Returns eligible files in a stable, sorted traversal order
"""

import os
import stat
import time
import logging
from pathlib import Path
from typing import List, Optional, Callable

from dupescan.core.filters import NameFilter, SizeSpec, accepts
from dupescan.core.interfaces import FileScanner
from dupescan.core.models import File

logger = logging.getLogger(__name__)


class FileScannerImpl(FileScanner):
    """
    Collects the regular files under root_dir that pass the configured filters.

    Attributes:
        root_dir: Root directory to scan
        recurse: Descend into subdirectories
        size_spec: Optional size constraint
        name_filter: Optional regex filter over the base name
    """

    def __init__(
        self,
        root_dir: str,
        recurse: bool = False,
        size_spec: Optional[SizeSpec] = None,
        name_filter: Optional[NameFilter] = None,
    ):
        self.root_dir = root_dir
        self.recurse = recurse
        self.size_spec = size_spec
        self.name_filter = name_filter

    def scan(self,
             progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None) -> List[File]:
        """
        Returns the filtered list of files found under root_dir.
        Raises RuntimeError if root_dir is missing or is not a directory.
        """
        logger.debug(f"Root directory: {self.root_dir}")
        logger.debug(f"Filters: recurse={self.recurse}, size={self.size_spec}, name={self.name_filter}")

        root_path = Path(self.root_dir)
        if not root_path.exists():
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)
        if not root_path.is_dir():
            error_msg = f"Not a directory: {self.root_dir}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)

        found_files = []
        processed_files = 0
        start_time = time.time()

        for root, dirs, files in os.walk(str(root_path), onerror=self._log_walk_error):
            if self.recurse:
                dirs[:] = sorted(d for d in dirs if not (Path(root) / d).is_symlink())
            else:
                dirs[:] = []

            for filename in sorted(files):
                file = self._process_file(Path(root) / filename)
                if file:
                    found_files.append(file)
                processed_files += 1

            if progress_callback:
                progress_callback("Scanning", processed_files, None)

        logger.debug(f"Total scan time: {time.time() - start_time:.2f} seconds")
        logger.debug(f"Scan completed. Found {len(found_files)} matching files.")
        return found_files

    @staticmethod
    def _log_walk_error(error: OSError) -> None:
        logger.warning(f"Cannot read directory: {error}")

    def _process_file(self, path: Path) -> Optional[File]:
        """
        Returns a File if path is a regular file that passes all filters, else None.
        """
        try:
            if path.is_symlink():
                logger.debug(f"Skipping symbolic link: {path}")
                return None
            stat_result = path.stat()
        except OSError as e:
            logger.debug(f"Could not stat {path}: {e}")
            return None

        if not stat.S_ISREG(stat_result.st_mode):
            logger.debug(f"Skipping non-regular file: {path}")
            return None

        size = stat_result.st_size
        if not accepts(size, path.name, self.size_spec, self.name_filter):
            logger.debug(f"Skipping {path} (filtered out)")
            return None

        logger.debug(f"Accepted file: {path.name} ({size} bytes)")
        return File(path=str(path), size=size)
