"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Groups the files of a single directory by size, then by content digest.
"""

import logging
from typing import List, Dict, Any, Callable, Optional
from collections import defaultdict
from dirdedup.core.errors import HashComputeError
from dirdedup.core.interfaces import FileGrouper, Hasher, ErrorCallback, GroupCallback
from dirdedup.core.models import FileEntry, DuplicateGroup
from dirdedup.core.hasher import HasherImpl
from dirdedup.core.selector import Selector

logger = logging.getLogger(__name__)


class FileGrouperImpl(FileGrouper):
    """
    Size pre-filter followed by full-content hashing.
    Files with a unique size are never opened.
    """

    def __init__(self, hasher: Hasher = None, selector: Selector = None):
        self.hasher = hasher or HasherImpl()
        self.selector = selector or Selector()

    def group_by_size(self, entries: List[FileEntry]) -> Dict[int, List[FileEntry]]:
        """Groups files by their size."""
        return self._group_by(entries, lambda e: e.size)

    def group_by_hash(
        self,
        entries: List[FileEntry],
        on_error: Optional[ErrorCallback] = None
    ) -> Dict[str, List[FileEntry]]:
        """Groups files by content digest. Unreadable files are left out."""
        return self._group_by(entries, self.hasher.compute_hash, on_error)

    def find_duplicates(
        self,
        entries: List[FileEntry],
        on_error: Optional[ErrorCallback] = None,
        on_group: Optional[GroupCallback] = None
    ) -> List[DuplicateGroup]:
        """
        Resolve one directory's files into duplicate groups.

        Args:
            entries: Regular files of a single directory
            on_error: Receives a HashComputeError for each unreadable file
            on_group: Receives each group as soon as it is resolved
        Returns:
            Groups ordered by size, then digest
        """
        size_groups = self.group_by_size(entries)
        groups = []
        for size in sorted(size_groups):
            hash_groups = self.group_by_hash(size_groups[size], on_error)
            for digest in sorted(hash_groups):
                group = self.selector.resolve(digest, hash_groups[digest])
                logger.info(f"Duplicate (hash: {group.short_digest}...): keeping [{group.keep.name}] "
                            f"in {group.directory}")
                if on_group:
                    on_group(group)
                groups.append(group)
        return groups

    @staticmethod
    def _group_by(
        entries: List[FileEntry],
        key_func: Callable[[FileEntry], Any],
        on_error: Optional[ErrorCallback] = None
    ) -> Dict[Any, List[FileEntry]]:
        """
        Helper method to group files by any computed key.
        Args:
            entries: Files to group
            key_func: Computes a hashable key from a FileEntry
            on_error: Receives errors raised by key_func
        Returns:
            Dict[key, List[FileEntry]] with only the groups of 2+ files
        """
        groups = defaultdict(list)
        skipped_files = 0
        for entry in entries:
            try:
                key = key_func(entry)
            except HashComputeError as e:
                logger.warning(str(e))
                skipped_files += 1
                if on_error:
                    on_error(e)
                continue
            groups[key].append(entry)

        if skipped_files > 0:
            logger.debug(f"Skipped {skipped_files} files due to hash computation errors")

        return {key: group for key, group in groups.items() if len(group) >= 2}
