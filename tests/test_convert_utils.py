"""
Unit tests for ConvertUtils size conversions.
"""
import pytest
from dupescan.utils.convert_utils import ConvertUtils


class TestHumanToBytes:
    @pytest.mark.parametrize("text, expected", [
        ("0", 0),
        ("1000", 1000),
        ("200B", 200),
        ("1K", 1024),
        ("1KB", 1024),
        ("1.5GB", int(1.5 * 1024 ** 3)),
        (" 2m ", 2 * 1024 ** 2),
        ("3T", 3 * 1024 ** 4),
        ("1P", 1024 ** 5),
    ])
    def test_valid_formats(self, text, expected):
        assert ConvertUtils.human_to_bytes(text) == expected

    @pytest.mark.parametrize("text", [
        "", "   ", "K", "abc", "-5", "-5K", "1.5", "infK", "nanM", "1BB", "10X", "1e3K",
    ])
    def test_invalid_formats(self, text):
        with pytest.raises(ValueError):
            ConvertUtils.human_to_bytes(text)

    def test_negative_size_message(self):
        with pytest.raises(ValueError, match="Negative size"):
            ConvertUtils.human_to_bytes("-5K")
