"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for file scanning, hashing and duplicate bookkeeping.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Tuple, Union, Any
import os

from dedupr.core.errors import ConfigError, DeduprError
from dedupr.utils.convert_utils import ConvertUtils


# ======================
#  Core Data Models
# ======================

# (digest, size) or (digest, size, basename)
DuplicateKey = Union[Tuple[str, int], Tuple[str, int, str]]


@dataclass(frozen=True)
class FileEntry:
    """
    A single file found by the scanner.
    Immutable: produced once by the traverser, consumed once by the hasher.
    """
    path: str
    size: int  # in bytes

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    def __repr__(self):
        return f"<FileEntry path={self.path}, size={self.size}>"


@dataclass
class HashResult:
    """Outcome of hashing one file: either a hex digest or an error reason."""
    path: str
    size: int
    digest: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.digest is not None


@dataclass
class FileRecord:
    """
    Bookkeeping entry for one distinct DuplicateKey.
    Holds the first-seen file and every later path that matched it.
    """
    file: str
    size: int
    hash: Optional[str] = None
    duplicates: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def has_duplicates(self) -> bool:
        return len(self.duplicates) > 0

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form used by the duplicate report."""
        return {
            "file": self.file,
            "size": self.size,
            "hash": self.hash,
            "duplicates": list(self.duplicates),
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'FileRecord':
        return FileRecord(
            file=data["file"],
            size=data["size"],
            hash=data.get("hash"),
            duplicates=list(data.get("duplicates") or []),
            error=data.get("error"),
        )

    def __repr__(self):
        return f"<FileRecord file={self.file}, size={self.size}, duplicates={len(self.duplicates)}>"


@dataclass
class FolderListing:
    """Direct children of one folder, already filtered and ordered."""
    folder: str
    files: List[FileEntry] = field(default_factory=list)
    subfolders: List[str] = field(default_factory=list)
    errors: List[DeduprError] = field(default_factory=list)  # skipped entries


@dataclass
class RunStats:
    """
    Counters collected during one run.
    """
    distinct_files: int = 0
    files_hashed: int = 0
    duplicates: int = 0
    deleted: int = 0
    errors: int = 0
    reclaimable_bytes: int = 0
    total_time: float = 0.0

    def summary(self) -> str:
        return (
            f"Found {self.distinct_files} distinct files, {self.duplicates} duplicates "
            f"({ConvertUtils.bytes_to_human(self.reclaimable_bytes)}) in {self.total_time:.3f} seconds"
        )


@dataclass
class RunResult:
    """Everything a caller gets back from Deduplicator.run()."""
    report: List[Dict[str, Any]]
    stats: RunStats
    errors: List[DeduprError] = field(default_factory=list)
    aborted: bool = False


"""
DTO for deduplication parameters with built-in validation.
Interface-agnostic — used by the CLI and by library callers.
"""

DEFAULT_OUTPUT = "dedupr.json"
DEFAULT_PARALLEL = 5
DEFAULT_HASH_SIZE_KB = 2048
DEFAULT_HASH_ALGORITHM = "sha256"


@dataclass
class DeduplicationParams:
    """
    Parameters for a deduplication run with validation.
    Absent or zero values fall back to the documented defaults.
    """
    folders: List[str] = field(default_factory=list)
    extensions: Optional[List[str]] = None
    output: Optional[str] = None
    parallel: int = 0
    hash_size: int = 0  # in KB
    hash_algorithm: Optional[str] = None
    verbose: bool = False
    reverse: bool = False
    filename: bool = False
    delete: bool = False
    trash: bool = False

    def __post_init__(self):
        """Apply defaults and validate immediately after creation."""
        self.folders = [str(folder) for folder in (self.folders or [])]

        if self.parallel is None or self.parallel == 0:
            self.parallel = DEFAULT_PARALLEL
        if self.parallel < 1:
            raise ConfigError(f"Parallel limit must be at least 1, got {self.parallel}")

        if self.hash_size is None or self.hash_size == 0:
            self.hash_size = DEFAULT_HASH_SIZE_KB
        if self.hash_size < 1:
            raise ConfigError(f"Hash size must be at least 1 KB, got {self.hash_size}")

        self.hash_algorithm = (self.hash_algorithm or DEFAULT_HASH_ALGORITHM).strip().lower()
        self.output = self.output or DEFAULT_OUTPUT

        # Normalize extensions: lowercase, no leading dot; "*" means everything
        if self.extensions:
            normalized = []
            for ext in self.extensions:
                ext = ext.strip().lower().lstrip(".")
                if ext:
                    normalized.append(ext)
            self.extensions = None if (not normalized or "*" in normalized) else normalized
        else:
            self.extensions = None

    @property
    def sample_size_bytes(self) -> int:
        return self.hash_size * 1024

    def describe(self) -> str:
        """One line with every option that has a value, for debug logging."""
        parts = []
        for key, value in self.__dict__.items():
            if value is None or value is False:
                continue
            parts.append(f"{key}: {value}")
        return " | ".join(parts)
