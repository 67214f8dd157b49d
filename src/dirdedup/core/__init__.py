"""
Core engine: hasher, grouper, selector and tree walker.

- HasherImpl: streamed full-content digest (SHA-256 or xxHash3-128)
- FileGrouperImpl: per-directory size then hash grouping
- Selector: shortest-name keep rule
- TreeWalkerImpl: depth-first walk, one directory level at a time
- Models and errors shared by the CLI and services

Pure Python, no console I/O.
"""

from .errors import (
    DedupError, InvalidRootError, DirectoryReadError, HashComputeError,
    DeletionError, SessionStateError)
from .models import (
    FileEntry, DuplicateGroup, ScanResult, DeletionReport, ScanParams,
    HashAlgorithmName, SessionState)
from .hasher import HasherImpl, Sha256AlgorithmImpl, XXHashAlgorithmImpl, make_algorithm
from .selector import Selector
from .grouper import FileGrouperImpl
from .walker import TreeWalkerImpl

__all__ = [
    "DedupError",
    "InvalidRootError",
    "DirectoryReadError",
    "HashComputeError",
    "DeletionError",
    "SessionStateError",
    "FileEntry",
    "DuplicateGroup",
    "ScanResult",
    "DeletionReport",
    "ScanParams",
    "HashAlgorithmName",
    "SessionState",
    "HasherImpl",
    "Sha256AlgorithmImpl",
    "XXHashAlgorithmImpl",
    "make_algorithm",
    "Selector",
    "FileGrouperImpl",
    "TreeWalkerImpl",
]
