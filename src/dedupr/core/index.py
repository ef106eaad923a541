"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/index.py
In-memory results index: DuplicateKey -> first-seen FileRecord.

A record is created on the first occurrence of a key; every later file with
the same key is appended to that record's duplicates. Records are never
removed or merged. Hashing failures are kept as standalone error records
keyed by path and never take part in duplicate matching.
"""

import logging
import threading
from typing import Dict, Hashable, List, NamedTuple, Optional, Set

from dedupr.core.models import DuplicateKey, FileEntry, FileRecord, HashResult

logger = logging.getLogger(__name__)


class Registration(NamedTuple):
    matched: bool
    record: Optional[FileRecord]


class ResultsIndex:
    """
    Run-scoped mapping from DuplicateKey to FileRecord.
    Insertion order is preserved and equals first-seen order across the run.
    """

    def __init__(self, match_filename: bool = False, log: Optional[logging.Logger] = None):
        self.match_filename = match_filename
        self.log = log or logger
        self._records: Dict[Hashable, FileRecord] = {}
        self._paths: Set[str] = set()
        self._lock = threading.Lock()

    def make_key(self, entry: FileEntry, result: HashResult) -> DuplicateKey:
        """Derives the duplicate key. Only valid for a successful hash."""
        if not result.ok:
            raise ValueError(f"Cannot derive a duplicate key from a failed hash: {entry.path}")
        if self.match_filename:
            return result.digest, entry.size, entry.name
        return result.digest, entry.size

    def register(self, entry: FileEntry, result: HashResult) -> Registration:
        """
        Inserts a new record or appends to an existing one.
        Returns matched=True if the file is a duplicate of an earlier one.
        A path already present in the index is ignored (matched=False, record=None).
        """
        if not result.ok:
            self.register_error(entry, result.error or "unknown error")
            return Registration(False, None)

        key = self.make_key(entry, result)

        with self._lock:
            if entry.path in self._paths:
                self.log.debug(f"File already processed, skip: {entry.path}")
                return Registration(False, None)
            self._paths.add(entry.path)

            record = self._records.get(key)
            if record is not None:
                record.duplicates.append(entry.path)
                return Registration(True, record)

            record = FileRecord(file=entry.path, size=entry.size, hash=result.digest)
            self._records[key] = record
            return Registration(False, record)

    def register_error(self, entry: FileEntry, reason: str) -> Optional[FileRecord]:
        """Records a hashing failure for this path."""
        with self._lock:
            if entry.path in self._paths:
                return None
            self._paths.add(entry.path)
            record = FileRecord(file=entry.path, size=entry.size, error=reason)
            self._records[("error", entry.path)] = record
            return record

    def contains(self, path: str) -> bool:
        with self._lock:
            return path in self._paths

    def records(self) -> List[FileRecord]:
        """All records, successful and failed, in insertion order."""
        with self._lock:
            return list(self._records.values())

    def __len__(self):
        with self._lock:
            return len(self._records)
