"""
Shared fixtures for dirdedup tests.
Creates isolated temporary directory trees with controlled file contents.
"""
import sys
import tempfile
from pathlib import Path
from typing import Dict

import pytest

# Add src/ to sys.path so the package is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from dirdedup.core.errors import HashComputeError
from dirdedup.core.hasher import HasherImpl


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def level_tree(temp_dir) -> Dict[str, Path]:
    """
    Two directory levels sharing identical content:

        A/a.txt        "same bytes"
        A/a_copy.txt   "same bytes"   ← only same-level duplicate
        A/unique.txt   other content, same size
        A/B/a.txt      "same bytes"   ← identical to A/a.txt but one level down
    """
    files = {}
    content = b"same bytes"

    a_dir = temp_dir / "A"
    a_dir.mkdir()
    b_dir = a_dir / "B"
    b_dir.mkdir()

    files["root"] = a_dir
    files["a"] = a_dir / "a.txt"
    files["a_copy"] = a_dir / "a_copy.txt"
    files["unique"] = a_dir / "unique.txt"
    files["nested"] = b_dir / "a.txt"

    files["a"].write_bytes(content)
    files["a_copy"].write_bytes(content)
    files["unique"].write_bytes(b"other byte")
    files["nested"].write_bytes(content)

    return files


class FailingHasher(HasherImpl):
    """Real hasher that refuses to read the given file names."""

    def __init__(self, unreadable):
        super().__init__()
        self.unreadable = set(unreadable)
        self.hashed = []

    def compute_hash(self, entry):
        self.hashed.append(entry.name)
        if entry.name in self.unreadable:
            raise HashComputeError(entry.path, "Permission denied")
        return super().compute_hash(entry)


@pytest.fixture
def failing_hasher_factory():
    return FailingHasher
