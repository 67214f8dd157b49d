"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Exception hierarchy for scanning and deletion.

Only InvalidRootError is fatal. The others are collected during a run,
reported to the user and skipped over.
"""


class DedupError(Exception):
    """Base class for all dirdedup errors."""


class InvalidRootError(DedupError):
    """Scan root is missing or is not a directory."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")


class PathError(DedupError):
    """An error tied to a single filesystem path."""

    action = "process"

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot {self.action} {path}: {reason}")


class DirectoryReadError(PathError):
    """A directory could not be listed; its subtree is skipped."""
    action = "read directory"


class HashComputeError(PathError):
    """A file could not be opened or read while hashing."""
    action = "hash"


class DeletionError(PathError):
    """A discard candidate could not be removed."""
    action = "delete"


class SessionStateError(DedupError):
    """Raised on an illegal CleanupSession transition."""
