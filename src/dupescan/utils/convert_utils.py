"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""
import math
import re

_SIZE_PATTERN = re.compile(r"^\s*([^A-Za-z\s]*)\s*([A-Za-z]*)\s*$")

# Binary multipliers; the trailing "B" of "KB", "MB", ... is optional
_MULTIPLIERS = {
    "": 1,
    "B": 1,
    "K": 1024,
    "M": 1024 ** 2,
    "G": 1024 ** 3,
    "T": 1024 ** 4,
    "P": 1024 ** 5,
}


class ConvertUtils:
    @staticmethod
    def human_to_bytes(size_str: str) -> int:
        """
        Convert a size such as '500', '200B', '10K', '1.5GB' or '2m' to bytes.
        Units are binary (1K = 1024 bytes) and case-insensitive.
        A value without a unit must be a whole number of bytes.
        Raises ValueError for empty, negative or malformed sizes.
        """
        if not size_str.strip():
            raise ValueError("Empty size")

        match = _SIZE_PATTERN.match(size_str)
        unit = match.group(2).upper() if match else None
        if unit and len(unit) == 2 and unit[0] in "KMGTP" and unit[1] == "B":
            unit = unit[0]
        if unit is None or unit not in _MULTIPLIERS:
            raise ValueError(
                f"Invalid size format: '{size_str.strip()}'. "
                f"Supported formats: 500, 200B, 10K, 20M, 2G, 1.5GB, etc."
            )

        number = match.group(1)
        if unit:
            try:
                value = float(number)
            except ValueError:
                raise ValueError(f"Invalid numeric value in size: '{number}'")
            if not math.isfinite(value):
                raise ValueError(f"Invalid numeric value in size: '{number}'")
        else:
            try:
                value = int(number)
            except ValueError:
                raise ValueError(f"Invalid numeric value in size: '{number}'")

        if value < 0:
            raise ValueError(f"Negative size not allowed: '{size_str.strip()}'")
        return int(value * _MULTIPLIERS[unit])
