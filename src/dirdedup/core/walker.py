"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/walker.py
Depth-first traversal that finds duplicates one directory level at a time.

Features:
- Each directory's own files are grouped on their own; files in different
  directories are never compared, even parent and child
- Iterative stack walk, subdirectories visited in name order
- Unlistable directories are reported and their subtree skipped
- Symbolic links and special files (sockets, FIFOs, devices) are skipped;
  directory symlinks are never followed
"""

import os
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from dirdedup.core.errors import InvalidRootError, DirectoryReadError
from dirdedup.core.grouper import FileGrouperImpl
from dirdedup.core.interfaces import (
    DirectoryWalker, FileGrouper, DirectoryCallback, ErrorCallback, GroupCallback
)
from dirdedup.core.models import FileEntry, ScanResult

logger = logging.getLogger(__name__)


class TreeWalkerImpl(DirectoryWalker):
    """
    Visits every directory reachable from a root and hands each directory's
    regular files to the grouper. Discard candidates land in the ScanResult
    passed in (or created) by the caller.
    """

    def __init__(self, grouper: FileGrouper = None):
        self.grouper = grouper or FileGrouperImpl()

    @staticmethod
    def validate_root(root: str) -> None:
        """Raise InvalidRootError unless root is an existing directory."""
        root_path = Path(root)
        if not root_path.exists():
            raise InvalidRootError(root, "Directory does not exist")
        if not root_path.is_dir():
            raise InvalidRootError(root, "Not a directory")

    def walk(
        self,
        root: str,
        result: Optional[ScanResult] = None,
        on_directory: Optional[DirectoryCallback] = None,
        on_group: Optional[GroupCallback] = None,
        on_error: Optional[ErrorCallback] = None
    ) -> ScanResult:
        self.validate_root(root)
        if result is None:
            result = ScanResult()

        def report(error):
            result.add_error(error)
            if on_error:
                on_error(error)

        logger.debug(f"Starting walk at {root}")
        stack = [str(root)]
        while stack:
            directory = stack.pop()
            if on_directory:
                on_directory(directory)

            try:
                subdirs, files = self._list_directory(directory)
            except DirectoryReadError as e:
                logger.warning(str(e))
                report(e)
                continue

            result.directories_scanned += 1
            result.files_scanned += len(files)

            for group in self.grouper.find_duplicates(files, on_error=report, on_group=on_group):
                result.add_group(group)

            # Reversed so the stack pops children in name order
            stack.extend(reversed(subdirs))

        logger.debug(f"Walk finished: {result!r}")
        return result

    @staticmethod
    def _list_directory(directory: str) -> Tuple[List[str], List[FileEntry]]:
        """
        Split a directory's immediate entries into subdirectory paths and
        regular files, both sorted by name.

        Raises:
            DirectoryReadError: the directory could not be listed.
        """
        subdirs = []
        files = []
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise DirectoryReadError(directory, e.strerror or str(e)) from e

        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append(entry.path)
                    continue
                if not entry.is_file(follow_symlinks=False):
                    logger.debug(f"Skipping non-regular file: {entry.path}")
                    continue
                size = entry.stat(follow_symlinks=False).st_size
            except OSError as e:
                logger.debug(f"Could not stat {entry.path}: {e}")
                continue

            files.append(FileEntry(name=entry.name, path=entry.path, size=size))

        return subdirs, files
