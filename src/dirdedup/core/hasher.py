"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Full-content file hashing with pluggable digest algorithms.

Files are streamed in fixed-size chunks, never loaded whole, and the
handle is closed before the next file is touched.
"""

import hashlib
import logging

import xxhash

from dirdedup.core.errors import HashComputeError
from dirdedup.core.interfaces import Hasher, HashAlgorithm
from dirdedup.core.models import FileEntry, HashAlgorithmName, DEFAULT_CHUNK_SIZE

logger = logging.getLogger(__name__)


class Sha256AlgorithmImpl(HashAlgorithm):
    name = "sha256"

    @staticmethod
    def new():
        return hashlib.sha256()


# Use the same way to implement and use any other hashing algorithm
class XXHashAlgorithmImpl(HashAlgorithm):
    name = "xxh128"

    @staticmethod
    def new():
        return xxhash.xxh3_128()


_ALGORITHMS = {
    HashAlgorithmName.SHA256: Sha256AlgorithmImpl,
    HashAlgorithmName.XXH128: XXHashAlgorithmImpl,
}


def make_algorithm(name: HashAlgorithmName) -> HashAlgorithm:
    """Instantiate the algorithm registered for `name`."""
    try:
        return _ALGORITHMS[name]()
    except KeyError:
        raise ValueError(f"Unsupported hash algorithm: {name!r}")


class HasherImpl(Hasher):
    """
    Computes lowercase hex digests of whole files using any HashAlgorithm.
    """

    def __init__(self, algorithm: HashAlgorithm = None, chunk_size: int = DEFAULT_CHUNK_SIZE):
        self.algorithm = algorithm or Sha256AlgorithmImpl()
        self.chunk_size = chunk_size

    def compute_hash(self, entry: FileEntry) -> str:
        """
        Stream the file through the digest.

        Raises:
            HashComputeError: the file could not be opened or read.
        """
        digest = self.algorithm.new()
        try:
            with open(entry.path, 'rb') as f:
                for chunk in iter(lambda: f.read(self.chunk_size), b''):
                    digest.update(chunk)
        except OSError as e:
            raise HashComputeError(entry.path, e.strerror or str(e)) from e

        result = digest.hexdigest()
        logger.debug(f"{self.algorithm.name} {result[:8]} {entry.path}")
        return result
