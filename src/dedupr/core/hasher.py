"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements the sampling file hasher and pluggable hash algorithms.

Small files (size < 2 x sample) are hashed in a single full read. Larger files
are hashed from exactly two regions, the first and the last `sample` bytes,
fed into one running hash state in that order. Files that share head and tail
but differ in the middle are reported as duplicates; sample size and algorithm
choice control that risk.
"""

import hashlib
import logging
from typing import Callable, Dict, List, Optional

import xxhash

from dedupr.core.errors import ConfigError, HashError
from dedupr.core.interfaces import HashAlgorithm, HashState
from dedupr.core.models import FileEntry, HashResult

logger = logging.getLogger(__name__)

XXHASH_ALGORITHMS: Dict[str, Callable[[], HashState]] = {
    "xxh32": xxhash.xxh32,
    "xxh64": xxhash.xxh64,
    "xxh3_64": xxhash.xxh3_64,
    "xxh128": xxhash.xxh128,
}


# Use the same way to implement and use any other hashing algorithm
class HashlibAlgorithmImpl(HashAlgorithm):
    def __init__(self, name: str):
        self.name = name

    def new(self) -> HashState:
        return hashlib.new(self.name)


class XXHashAlgorithmImpl(HashAlgorithm):
    def __init__(self, name: str = "xxh64"):
        self.name = name

    def new(self) -> HashState:
        return XXHASH_ALGORITHMS[self.name]()


def available_algorithms() -> List[str]:
    """Sorted names of every algorithm accepted by resolve_algorithm()."""
    names = {
        name.lower() for name in hashlib.algorithms_available
        if not name.lower().startswith("shake")  # variable-length digests
    }
    names.update(XXHASH_ALGORITHMS)
    return sorted(names)


def resolve_algorithm(name: str) -> HashAlgorithm:
    """
    Validates an algorithm name and returns its implementation.
    Must be called before any file is opened.

    Raises:
        ConfigError: If the algorithm is not supported.
    """
    key = (name or "").strip().lower()
    if key in XXHASH_ALGORITHMS:
        return XXHashAlgorithmImpl(key)

    if key and not key.startswith("shake"):
        try:
            hashlib.new(key)
        except (ValueError, TypeError):
            pass
        else:
            return HashlibAlgorithmImpl(key)

    raise ConfigError(f"Hash algorithm {name} not supported")


class SamplingHasherImpl:
    """
    Computes a head+tail fingerprint of a file.
    Never raises for I/O problems: failures come back as HashResult.error.
    """

    def __init__(self, algorithm: HashAlgorithm, sample_size: int, log: Optional[logging.Logger] = None):
        if sample_size < 1:
            raise ConfigError(f"Sample size must be at least 1 byte, got {sample_size}")
        self.algorithm = algorithm
        self.sample_size = sample_size
        self.log = log or logger

    def is_sampled(self, size: int) -> bool:
        """True if a file of this size is hashed from two regions instead of a full read."""
        return size >= 2 * self.sample_size

    def hash(self, entry: FileEntry) -> HashResult:
        try:
            digest = self._compute(entry)
        except OSError as e:
            error = HashError(f"Error reading {entry.path}: {e}", path=entry.path)
            self.log.debug(error.message)
            return HashResult(path=entry.path, size=entry.size, error=error.message)

        return HashResult(path=entry.path, size=entry.size, digest=digest)

    def _compute(self, entry: FileEntry) -> str:
        state = self.algorithm.new()

        with open(entry.path, 'rb') as f:
            if not self.is_sampled(entry.size):
                state.update(f.read())
            else:
                state.update(f.read(self.sample_size))
                f.seek(entry.size - self.sample_size)
                state.update(f.read(self.sample_size))

        return state.hexdigest()
