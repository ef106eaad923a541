"""
dedupr — find duplicate files across folder trees by sampling their content.

Core features:
- Head+tail sampling hash (hashlib or xxHash); small files are hashed in full
- Duplicate key: hash + size, optionally + filename
- First file seen wins: folder order and sorted entries make results reproducible
- Optional deletion of duplicates, permanently or to the system trash (via send2trash)
- JSON duplicate report
"""

# Get version
try:
    from importlib.metadata import version as _version, PackageNotFoundError
    __version__ = _version("dedupr")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from dedupr.commands import DeduplicationCommand
from dedupr.core import (
    Deduplicator, DeduplicationParams, FileEntry, FileRecord, HashResult, RunResult, RunStats,
    DeduprError, ConfigError)
from dedupr.services import FileService, ReportService

__all__ = [
    "DeduplicationCommand",
    "Deduplicator",
    "DeduplicationParams",
    "FileEntry",
    "FileRecord",
    "HashResult",
    "RunResult",
    "RunStats",
    "DeduprError",
    "ConfigError",
    "FileService",
    "ReportService",
    "__version__",
]
