"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the deduplication engine.
These protocols enforce structural typing using Python's `typing.Protocol` so
each stage can be swapped out in tests without touching the scheduler.

Key Components:
---------------
- HashAlgorithm: Factory for a running hash state (hashlib or xxhash).
- Hasher: Computes the sampling fingerprint of a single file.
- FolderScanner: Lists one folder into ordered files and subfolders.
- ActionPolicy: Decides what happens to a confirmed duplicate.
"""

from typing import Protocol, Optional
from dedupr.core.errors import DeleteError
from dedupr.core.models import FileEntry, FileRecord, FolderListing, HashResult


# ===== Interfaces =====

class HashState(Protocol):
    """Running hash object as returned by hashlib.new() or xxhash.xxh64()."""
    def update(self, data: bytes) -> None: ...
    def hexdigest(self) -> str: ...


class HashAlgorithm(Protocol):
    """
    Interface for named hash algorithms.

    Allows plugging in different hashing families like SHA-256, MD5, or xxHash
    without affecting the rest of the deduplication logic.
    """
    name: str

    def new(self) -> HashState:
        """Returns a fresh running hash state."""
        ...


class Hasher(Protocol):
    """Interface for fingerprinting one file."""
    def hash(self, entry: FileEntry) -> HashResult: ...


class FolderScanner(Protocol):
    """
    Interface for listing a folder.

    Methods:
        scan: Lists direct children of a folder, split into files and subfolders.
    """
    def scan(self, folder: str) -> FolderListing:
        """
        Args:
            folder: Absolute path of the folder to list.

        Returns:
            FolderListing with filtered, ordered files and subfolders.

        Raises:
            TraversalError: If the folder cannot be listed.
        """
        ...


class ActionPolicy(Protocol):
    """Interface for the side effect applied to a confirmed duplicate."""
    deletes: bool

    def apply(self, path: str, record: FileRecord) -> Optional[DeleteError]:
        """Returns the deletion failure, if any. Never raises for I/O errors."""
        ...
