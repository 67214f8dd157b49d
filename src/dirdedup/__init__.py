"""
dirdedup: removes duplicate files that sit side by side in the same directory.

Core features:
- Duplicates are detected per directory level only, never across directories
- Size pre-filter, then full-content hash (SHA-256 by default, xxHash3-128 optional)
- Shortest filename is kept, ties broken alphabetically
- Permanent deletion after an interactive y/N confirmation
"""

# Get version
from importlib.metadata import version as _version, PackageNotFoundError

try:
    __version__ = _version("dirdedup")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API, only what users should import directly
from dirdedup.commands import CleanupSession, is_affirmative
from dirdedup.core import (
    FileEntry, DuplicateGroup, ScanResult, DeletionReport, ScanParams,
    HashAlgorithmName, SessionState, DedupError, InvalidRootError)
from dirdedup.services import DeletionService
from dirdedup.utils.convert_utils import ConvertUtils

__all__ = [
    "CleanupSession",
    "is_affirmative",
    "FileEntry",
    "DuplicateGroup",
    "ScanResult",
    "DeletionReport",
    "ScanParams",
    "HashAlgorithmName",
    "SessionState",
    "DedupError",
    "InvalidRootError",
    "DeletionService",
    "ConvertUtils",
    "__version__",
]
