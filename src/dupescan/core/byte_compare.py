"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/byte_compare.py
Exact content comparison of two files, streamed in bounded chunks.
"""

import logging

from dupescan.core.config import ComparisonConfig
from dupescan.core.models import File

logger = logging.getLogger(__name__)


class ByteStreamEqual:
    """
    Reads both files in lock-step and stops at the first differing chunk.
    Memory use is two buffers of buffer_size, whatever the file size.
    """

    def __init__(self, buffer_size: int = ComparisonConfig.READ_BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError("Buffer size must be positive")
        self.buffer_size = buffer_size

    def equal(self, file_a: File, file_b: File) -> bool:
        with open(file_a.path, 'rb') as fa, open(file_b.path, 'rb') as fb:
            offset = 0
            while True:
                chunk_a = fa.read(self.buffer_size)
                chunk_b = fb.read(self.buffer_size)
                if chunk_a != chunk_b:
                    logger.debug(f"{file_a.path} and {file_b.path} differ near offset {offset}")
                    return False
                if not chunk_a:
                    return True
                offset += len(chunk_a)

