"""
Shared fixtures for dupescan tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
from pathlib import Path
from typing import Dict

from dupescan.core.models import File


def make_file(path: Path, content: bytes) -> File:
    """Writes content to path and returns the matching File."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    return File(path=str(path), size=len(content))


@pytest.fixture
def temp_dir(tmp_path) -> Path:
    """Isolated temporary directory, auto-cleanup after test."""
    return tmp_path


@pytest.fixture
def hello_world_dir(temp_dir) -> Path:
    """a.txt and b.txt hold "hello", c.txt holds "world" (all 5 bytes)."""
    (temp_dir / "a.txt").write_bytes(b"hello")
    (temp_dir / "b.txt").write_bytes(b"hello")
    (temp_dir / "c.txt").write_bytes(b"world")
    return temp_dir


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files:
    - 2 identical .txt files (1KB of 'A') plus a copy in a subdirectory
    - 2 identical .log files (2KB of 'B')
    - 1 unique .txt file with the same length as the 'A' files
    - 1 unique .log file
    """
    files = {}

    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    content_b = b"B" * 2048
    files["dup2_a"] = temp_dir / "dup2_a.log"
    files["dup2_b"] = temp_dir / "dup2_b.log"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    files["same_len"] = temp_dir / "same_len.txt"
    files["same_len"].write_bytes(b"C" * 1024)

    files["unique_log"] = temp_dir / "unique.log"
    files["unique_log"].write_bytes(b"D" * 3000)

    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)

    return files
