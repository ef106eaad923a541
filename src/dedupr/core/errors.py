"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Error taxonomy for the scan-hash-dedup engine.

Only ConfigError is ever raised out of the core. The I/O errors below are
created at the smallest possible scope, logged, and collected on the run
result so that one bad file or folder never aborts the whole scan.
"""

from typing import Optional


class DeduprError(Exception):
    """Base class for all dedupr errors. Optionally bound to a filesystem path."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __repr__(self):
        return f"<{self.kind} path={self.path}, message={self.message}>"


class ConfigError(DeduprError, ValueError):
    """Invalid options. Fatal, raised before any filesystem access."""


class TraversalError(DeduprError):
    """A folder could not be listed; its branch is skipped."""


class EntryStatError(DeduprError):
    """A single directory entry could not be stat-ed; the entry is skipped."""


class HashError(DeduprError):
    """A file could not be opened or read while hashing."""


class DeleteError(DeduprError):
    """A confirmed duplicate could not be removed from storage."""
