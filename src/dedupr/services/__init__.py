"""Duplicate removal and report output services."""

from .file_service import FileService
from .report_service import ReportService

__all__ = ["FileService", "ReportService"]
