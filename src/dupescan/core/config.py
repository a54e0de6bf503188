"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/config.py
Size constants used by the comparison engine.
"""


class ComparisonConfig:
    # Both files must be larger than this for the partial checksum pre-check to run
    LARGE_FILE_THRESHOLD = 500 * 1024 * 1024

    # Size of the leading and trailing windows hashed by the partial checksum
    PARTIAL_WINDOW_SIZE = 5 * 1024 * 1024

    # Buffer used for every sequential read (full checksum, byte comparison)
    READ_BUFFER_SIZE = 64 * 1024
