"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/filters.py
File eligibility predicates: size specifications ("-500", "+200M", "500K")
and regular expressions over the file's base name.
"""

import re
import operator
from dataclasses import dataclass
from typing import Optional

from dupescan.utils.convert_utils import ConvertUtils

_SIGNS = {"-": "<", "+": ">"}

_OPERATORS = {
    "<": operator.lt,
    ">": operator.gt,
    "=": operator.eq,
}


@dataclass(frozen=True)
class SizeSpec:
    """
    A size constraint: file length compared against a byte threshold.
    operator_symbol is one of "<", ">", "=".
    """
    operator_symbol: str
    threshold: int

    def matches(self, size: int) -> bool:
        return _OPERATORS[self.operator_symbol](size, self.threshold)

    def __str__(self):
        return f"{self.operator_symbol}{self.threshold}"


def parse_size_spec(spec: str) -> SizeSpec:
    """
    Parse a size specification.

    "-500" means 'less than 500 bytes', "+500" means 'greater than 500 bytes',
    "500" means exactly 500 bytes. The number may carry a unit suffix
    (B, K, M, G, ... or KB, MB, GB, ...), see ConvertUtils.human_to_bytes.

    Raises:
        ValueError: If the specification is empty or malformed.
    """
    if spec is None or not spec.strip():
        raise ValueError("Empty size specification")

    text = spec.strip()
    symbol = "="
    if text[0] in _SIGNS:
        symbol = _SIGNS[text[0]]
        text = text[1:]

    try:
        threshold = ConvertUtils.human_to_bytes(text)
    except ValueError as e:
        raise ValueError(f"Invalid size specification '{spec.strip()}': {e}")

    return SizeSpec(operator_symbol=symbol, threshold=threshold)


class NameFilter:
    """
    Matches the whole base name of a file against a regular expression,
    optionally negated.
    """

    def __init__(self, pattern: str, invert: bool = False):
        try:
            self._regex = re.compile(pattern)
        except re.error as e:
            raise ValueError(f"Invalid regular expression '{pattern}': {e}")
        self.pattern = pattern
        self.invert = invert

    def matches(self, name: str) -> bool:
        matched = self._regex.fullmatch(name) is not None
        return not matched if self.invert else matched

    def __repr__(self):
        return f"<NameFilter pattern={self.pattern!r}, invert={self.invert}>"


def accepts(size: int, name: str,
            size_spec: Optional[SizeSpec] = None,
            name_filter: Optional[NameFilter] = None) -> bool:
    """Logical AND of the configured filters; an unset filter accepts everything."""
    if size_spec is not None and not size_spec.matches(size):
        return False
    if name_filter is not None and not name_filter.matches(name):
        return False
    return True
