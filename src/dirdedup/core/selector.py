"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/selector.py
Pure keep/discard selection for duplicate groups, no I/O.

The file with the shortest name is kept; names of equal length are
ordered lexicographically. Length and order are taken over the encoded
filesystem bytes of the name, not its characters. The decision depends
only on the names, never on the order the filesystem listed them in.
"""
import os
from typing import List, Tuple
from dirdedup.core.models import FileEntry, DuplicateGroup


class Selector:
    """
    Chooses the single file to keep in a group of identical files.
    """

    @staticmethod
    def sort_key(entry: FileEntry) -> Tuple[int, bytes]:
        raw = os.fsencode(entry.name)
        return len(raw), raw

    @staticmethod
    def select(files: List[FileEntry]) -> Tuple[FileEntry, List[FileEntry]]:
        """
        Returns (keep, discards). Input list is not modified.
        """
        if len(files) < 2:
            raise ValueError("A duplicate group needs at least two files")

        ordered = sorted(files, key=Selector.sort_key)
        return ordered[0], ordered[1:]

    @staticmethod
    def resolve(digest: str, files: List[FileEntry]) -> DuplicateGroup:
        """Build a DuplicateGroup from same-size, same-digest files."""
        keep, discards = Selector.select(files)
        return DuplicateGroup(digest=digest, size=keep.size, keep=keep, discards=discards)
