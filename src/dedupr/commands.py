"""
Unified command orchestrator for deduplication.
This is the SINGLE source of truth for the workflow — used by the CLI and by library callers.
"""
import logging
from typing import List, Optional

from dedupr.core.deduplicator import Deduplicator
from dedupr.core.models import DeduplicationParams, RunResult
from dedupr.services.report_service import ReportService

logger = logging.getLogger(__name__)


class DeduplicationCommand:
    """
    Orchestrates the entire deduplication workflow:
    1. Validate parameters and folders
    2. Scan, hash and register every file
    3. Hand the duplicate report to the output sink

    Usage:
        params = DeduplicationParams(folders=["~/photos", "~/camera"], delete=False)
        command = DeduplicationCommand()
        result = command.execute(params)
        for record in result.report:
            print(record["file"], record["duplicates"])
    """

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger
        self._result: Optional[RunResult] = None

    def execute(self, params: DeduplicationParams, write_output: bool = True) -> RunResult:
        """
        Execute deduplication with given parameters.

        Args:
            params: Validated deduplication parameters
            write_output: Save the report to params.output when True

        Returns:
            RunResult with the report, statistics and recorded errors

        Raises:
            ConfigError: If parameters or folders are invalid
            OSError: If the report cannot be written
        """
        deduplicator = Deduplicator(params, log=self.log)
        self._result = deduplicator.run(params.folders)

        if write_output and params.output:
            ReportService.write_report(self._result.report, params.output)

        return self._result

    def get_report(self) -> List[dict]:
        """Get the duplicate report of the last execution."""
        return list(self._result.report) if self._result else []
