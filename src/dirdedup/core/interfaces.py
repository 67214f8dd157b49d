"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Structural interfaces (typing.Protocol) for the pieces of the scan pipeline.

Key Components:
---------------
- HashAlgorithm: incremental digest factory (SHA-256, xxHash, ...).
- Hasher: computes the content digest of a single file.
- FileGrouper: turns one directory's files into duplicate groups.
- DirectoryWalker: visits a tree and collects groups per directory.
"""

from typing import Protocol, List, Dict, Optional, Callable, Any
from dirdedup.core.errors import DedupError
from dirdedup.core.models import FileEntry, DuplicateGroup, ScanResult


ErrorCallback = Callable[[DedupError], None]
GroupCallback = Callable[[DuplicateGroup], None]
DirectoryCallback = Callable[[str], None]


class HashAlgorithm(Protocol):
    """
    Interface for digest algorithms.

    Returns a fresh incremental hash object exposing update() and hexdigest().
    """
    name: str

    def new(self) -> Any:
        ...


class Hasher(Protocol):
    """Interface for hashing the full content of a file."""
    def compute_hash(self, entry: FileEntry) -> str: ...


class FileGrouper(Protocol):
    """
    Interface for grouping the files of ONE directory.
    """
    def group_by_size(self, entries: List[FileEntry]) -> Dict[int, List[FileEntry]]:
        """Group files by their size in bytes."""
        ...

    def group_by_hash(
        self,
        entries: List[FileEntry],
        on_error: Optional[ErrorCallback] = None
    ) -> Dict[str, List[FileEntry]]:
        """Group files by their content digest."""
        ...

    def find_duplicates(
        self,
        entries: List[FileEntry],
        on_error: Optional[ErrorCallback] = None,
        on_group: Optional[GroupCallback] = None
    ) -> List[DuplicateGroup]:
        """Size pre-filter, then hash, then keep/discard selection."""
        ...


class DirectoryWalker(Protocol):
    """
    Interface for the tree traversal.
    """
    def walk(
        self,
        root: str,
        result: Optional[ScanResult] = None,
        on_directory: Optional[DirectoryCallback] = None,
        on_group: Optional[GroupCallback] = None,
        on_error: Optional[ErrorCallback] = None
    ) -> ScanResult:
        """
        Visit every directory below root and collect duplicate groups.

        Args:
            root: Directory to start from.
            result: Collector to append to; a new one is created if omitted.
            on_directory: Called with each directory path before it is listed.
            on_group: Called for each duplicate group found.
            on_error: Called for each non-fatal error.

        Returns:
            The collector holding groups, deletion list and errors.
        """
        ...
