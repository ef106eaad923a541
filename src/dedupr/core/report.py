"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/report.py
Turns the results index into the serializable duplicate report.
"""

from typing import Any, Dict, List

from dedupr.core.index import ResultsIndex


class ReportBuilder:
    """Builds report values; writing them out is the output sink's job."""

    @staticmethod
    def build(index: ResultsIndex) -> List[Dict[str, Any]]:
        """
        Records that have at least one duplicate, in first-seen order.
        Unique files and error records are left out.
        """
        return [
            record.to_dict()
            for record in index.records()
            if record.error is None and record.has_duplicates
        ]

    @staticmethod
    def build_errors(index: ResultsIndex) -> List[Dict[str, Any]]:
        """Files that could not be hashed."""
        return [
            {"file": record.file, "size": record.size, "error": record.error}
            for record in index.records()
            if record.error is not None
        ]
