"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for per-directory duplicate detection and deletion.
"""

from dataclasses import dataclass, field
from typing import List, Tuple
import os
from enum import Enum

from dirdedup.core.errors import DedupError


# =============================
# Enums
# =============================

class HashAlgorithmName(Enum):
    """
    Content digest used to compare same-size files.
    """
    SHA256 = "sha256"
    XXH128 = "xxh128"

    @property
    def display_name(self) -> str:
        """Human-readable name for console output."""
        mapping = {
            HashAlgorithmName.SHA256: "SHA-256",
            HashAlgorithmName.XXH128: "xxHash3-128",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class SessionState(Enum):
    IDLE = "idle"
    SCANNING = "scanning"
    AWAITING_CONFIRMATION = "awaiting-confirmation"
    DELETING = "deleting"
    DONE = "done"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionState.DONE, SessionState.CANCELLED)


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileEntry:
    """
    A regular file found while listing one directory.
    """
    name: str
    path: str
    size: int  # in bytes

    @property
    def directory(self) -> str:
        return os.path.dirname(self.path)

    def __repr__(self):
        return f"<FileEntry path={self.path}, size={self.size}>"


@dataclass
class DuplicateGroup:
    """
    Files of one directory sharing size and content digest.
    `keep` survives, every file in `discards` is a deletion candidate.
    """
    digest: str
    size: int
    keep: FileEntry
    discards: List[FileEntry]

    @property
    def files(self) -> List[FileEntry]:
        """Keep file first, then discards in selection order."""
        return [self.keep] + self.discards

    @property
    def directory(self) -> str:
        return self.keep.directory

    @property
    def short_digest(self) -> str:
        return self.digest[:8]

    @property
    def reclaimable_bytes(self) -> int:
        return self.size * len(self.discards)

    def __repr__(self):
        return f"<DuplicateGroup digest={self.short_digest}, size={self.size}, count={len(self.files)}>"


class ScanResult:
    """
    Collector threaded through a tree walk.

    The deletion list is append-only while scanning; `files_to_delete`
    hands out an immutable copy.
    """

    def __init__(self):
        self._files_to_delete: List[str] = []
        self.groups: List[DuplicateGroup] = []
        self.errors: List[DedupError] = []
        self.directories_scanned: int = 0
        self.files_scanned: int = 0

    def add_group(self, group: DuplicateGroup) -> None:
        self.groups.append(group)
        for entry in group.discards:
            self._files_to_delete.append(entry.path)

    def add_error(self, error: DedupError) -> None:
        self.errors.append(error)

    @property
    def files_to_delete(self) -> Tuple[str, ...]:
        return tuple(self._files_to_delete)

    @property
    def has_duplicates(self) -> bool:
        return bool(self._files_to_delete)

    @property
    def reclaimable_bytes(self) -> int:
        return sum(g.reclaimable_bytes for g in self.groups)

    def __repr__(self):
        return (f"<ScanResult dirs={self.directories_scanned}, groups={len(self.groups)}, "
                f"to_delete={len(self._files_to_delete)}, errors={len(self.errors)}>")


@dataclass
class DeletionReport:
    """Outcome of one deletion batch."""
    deleted: List[str] = field(default_factory=list)
    failed: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.deleted)

    @property
    def failure_count(self) -> int:
        return len(self.failed)


"""
Scan configuration with built-in validation.
"""

DEFAULT_CHUNK_SIZE = 64 * 1024


@dataclass
class ScanParams:
    """Parameters for a scan, validated on creation."""
    root_dir: str
    algorithm: HashAlgorithmName = HashAlgorithmName.SHA256
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self):
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if self.chunk_size <= 0:
            raise ValueError("Chunk size must be positive")

        if isinstance(self.algorithm, str):
            self.algorithm = HashAlgorithmName(self.algorithm.lower())
