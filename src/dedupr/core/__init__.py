"""
Core deduplication engine: scanner, hasher, results index and scheduler.

This package contains the performance-critical foundation of dedupr:
- FolderScannerImpl: sorted, extension-filtered folder listing
- SamplingHasherImpl: head+tail sampling hash over hashlib or xxHash algorithms
- ResultsIndex: DuplicateKey -> first-seen FileRecord, thread-safe registration
- Deduplicator: depth-first pass with bounded-parallel hashing per folder
- Models: FileEntry, HashResult, FileRecord and configuration objects

All components are pure Python with no terminal formatting, suitable for CLI and library usage.
"""

from .errors import (
    DeduprError, ConfigError, TraversalError, EntryStatError, HashError, DeleteError)
from .models import (
    FileEntry, HashResult, FileRecord, FolderListing, DeduplicationParams, RunStats, RunResult)
from .scanner import FolderScannerImpl
from .hasher import (
    SamplingHasherImpl, HashlibAlgorithmImpl, XXHashAlgorithmImpl,
    resolve_algorithm, available_algorithms)
from .index import ResultsIndex, Registration
from .actions import RecordOnlyPolicy, DeletePolicy, make_policy
from .report import ReportBuilder
from .deduplicator import Deduplicator, RunContext

__all__ = [
    "DeduprError",
    "ConfigError",
    "TraversalError",
    "EntryStatError",
    "HashError",
    "DeleteError",
    "FileEntry",
    "HashResult",
    "FileRecord",
    "FolderListing",
    "DeduplicationParams",
    "RunStats",
    "RunResult",
    "FolderScannerImpl",
    "SamplingHasherImpl",
    "HashlibAlgorithmImpl",
    "XXHashAlgorithmImpl",
    "resolve_algorithm",
    "available_algorithms",
    "ResultsIndex",
    "Registration",
    "RecordOnlyPolicy",
    "DeletePolicy",
    "make_policy",
    "ReportBuilder",
    "Deduplicator",
    "RunContext",
]
