"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/report_service.py
JSON output sink for the duplicate report.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from dedupr.core.models import FileRecord

logger = logging.getLogger(__name__)


class ReportService:
    """Writes and reads the duplicate report as a JSON array of records."""

    @staticmethod
    def write_report(report: List[Dict[str, Any]], output: str) -> Path:
        path = Path(output)
        if path.parent and not path.parent.exists():
            path.parent.mkdir(parents=True, exist_ok=True)

        # Undecodable filenames come from os.listdir as surrogates; write their raw bytes back
        with open(path, "w", encoding="utf-8", errors="surrogateescape") as f:
            json.dump(report, f, indent=2, ensure_ascii=False)

        logger.info(f"Saved output to {path}")
        return path

    @staticmethod
    def load_report(output: str) -> List[FileRecord]:
        with open(output, "r", encoding="utf-8", errors="surrogateescape") as f:
            data = json.load(f)

        if not isinstance(data, list):
            raise ValueError(f"Invalid report format in {output}: expected a JSON array")
        return [FileRecord.from_dict(item) for item in data]
