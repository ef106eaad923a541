"""
Shared fixtures for deduplication core tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so the 'dedupr' package is importable without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for deduplication scenarios:
    - a/ and b/ each hold a copy of the same 1KB content under the same name
    - a/ holds a second duplicate pair (2KB of 'B') inside one folder
    - unique files with different content or size
    - a .tmp file (filtered out when extensions are set)
    - a nested subfolder with another copy of the 1KB content
    """
    files = {}
    a = temp_dir / "a"
    b = temp_dir / "b"
    nested = a / "nested"
    nested.mkdir(parents=True)
    b.mkdir()

    # Duplicate pair #1 across folders (1KB of 'A')
    content_a = b"A" * 1024
    files["a_1"] = a / "1.txt"
    files["b_1"] = b / "1.txt"
    files["a_1"].write_bytes(content_a)
    files["b_1"].write_bytes(content_a)

    # Duplicate pair #2 inside one folder (2KB of 'B')
    content_b = b"B" * 2048
    files["a_dup2_x"] = a / "dup2_x.txt"
    files["a_dup2_y"] = a / "dup2_y.txt"
    files["a_dup2_x"].write_bytes(content_b)
    files["a_dup2_y"].write_bytes(content_b)

    # Unique files
    files["unique1"] = a / "unique1.txt"
    files["unique1"].write_bytes(b"C" * 1500)
    files["unique2"] = b / "unique2.txt"
    files["unique2"].write_bytes(b"D" * 2500)

    # Filtered file (wrong extension)
    files["filtered"] = b / "ignore.tmp"
    files["filtered"].write_bytes(b"E" * 1024)

    # Subdirectory with another copy of content A
    files["nested"] = nested / "deep.txt"
    files["nested"].write_bytes(content_a)

    return files


@pytest.fixture
def pair_dirs(temp_dir):
    """Two folders with one identical file each: a/1.txt and b/1.txt."""
    a = temp_dir / "a"
    b = temp_dir / "b"
    a.mkdir()
    b.mkdir()
    (a / "1.txt").write_bytes(b"same content" * 100)
    (b / "1.txt").write_bytes(b"same content" * 100)
    return a, b
