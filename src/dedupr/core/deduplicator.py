"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

deduplicator.py
Implements the scan-hash-dedup pass over one or more root folders.

Pipeline per folder (depth-first):
    list folder -> hash its files in batches of `parallel` -> register results
    -> descend into subfolders

Batches are strictly sequential: no file of batch N+1 is opened before every
file of batch N has been hashed and registered. Inside a batch, results are
registered in traversal order rather than completion order.

Known limitation: there is no per-file timeout, a hung read blocks its batch.
"""
import os
import time
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional

from dedupr.core.actions import make_policy
from dedupr.core.errors import ConfigError, DeduprError, HashError, TraversalError
from dedupr.core.hasher import SamplingHasherImpl, resolve_algorithm
from dedupr.core.index import ResultsIndex
from dedupr.core.interfaces import ActionPolicy, FolderScanner, Hasher
from dedupr.core.models import DeduplicationParams, FileEntry, HashResult, RunResult, RunStats
from dedupr.core.report import ReportBuilder
from dedupr.core.scanner import FolderScannerImpl

logger = logging.getLogger(__name__)


@dataclass
class RunContext:
    """State of a single run. Created fresh by every call to run()."""
    params: DeduplicationParams
    folders: List[str]
    index: ResultsIndex
    hasher: Hasher
    scanner: FolderScanner
    policy: ActionPolicy
    executor: ThreadPoolExecutor
    start_time: float = field(default_factory=time.time)
    stats: RunStats = field(default_factory=RunStats)
    errors: List[DeduprError] = field(default_factory=list)


# =============================
# Main Deduplicator Class
# =============================
class Deduplicator:
    """
    Finds duplicate files by sampling hash across folder trees.
    The first file seen for a given key is the original; later ones are duplicates.
    """

    def __init__(self, params: DeduplicationParams, log: Optional[logging.Logger] = None):
        self.params = params
        self.log = log or logger

    def validate(self, folders: List[str]) -> List[str]:
        """
        Checks options and folders before any work starts.
        Returns the absolute folder list in processing order.

        Raises:
            ConfigError: On any invalid option or missing folder.
        """
        params = self.params
        if not folders:
            raise ConfigError("No folders were passed")
        if params.parallel < 1:
            raise ConfigError(f"Parallel limit must be at least 1, got {params.parallel}")
        if params.hash_size < 1:
            raise ConfigError(f"Hash size must be at least 1 KB, got {params.hash_size}")
        resolve_algorithm(params.hash_algorithm)

        cwd = os.getcwd()
        absolute = []
        for folder in folders:
            path = folder if os.path.isabs(folder) else os.path.join(cwd, folder)
            path = os.path.normpath(path)
            if path in absolute:
                self.log.warning(f"Folder passed more than once, skip: {path}")
                continue
            absolute.append(path)

        if params.reverse:
            absolute.reverse()

        for path in absolute:
            if not os.path.exists(path):
                raise ConfigError(f"Folder does not exist: {path}", path=path)
            if not os.path.isdir(path):
                raise ConfigError(f"Not a directory: {path}", path=path)

        return absolute

    def run(self, folders: Optional[List[str]] = None) -> RunResult:
        """
        Scans the given folders (defaults to params.folders) and returns the duplicate report.
        Only ConfigError is raised; every I/O failure is recorded on the result.
        """
        params = self.params
        self.log.info("##########")
        self.log.info("# Dedupr #")
        self.log.info("##########")
        self.log.debug(f"Options: {params.describe()}")

        folders = self.validate(list(folders if folders is not None else params.folders))
        algorithm = resolve_algorithm(params.hash_algorithm)

        with ThreadPoolExecutor(max_workers=params.parallel) as executor:
            ctx = RunContext(
                params=params,
                folders=folders,
                index=ResultsIndex(match_filename=params.filename, log=self.log),
                hasher=SamplingHasherImpl(algorithm, params.sample_size_bytes, log=self.log),
                scanner=FolderScannerImpl(extensions=params.extensions, reverse=params.reverse, log=self.log),
                policy=make_policy(params.delete, use_trash=params.trash, log=self.log),
                executor=executor,
            )

            aborted = False
            try:
                for folder in ctx.folders:
                    self.scan_folder(ctx, folder)
            except Exception:
                # Fail-soft at the top level: keep whatever was registered so far
                self.log.exception("Failure processing files")
                aborted = True

        return self.end(ctx, aborted)

    def scan_folder(self, ctx: RunContext, folder: str) -> None:
        """Hashes every file of `folder`, then recurses into its subfolders."""
        try:
            listing = ctx.scanner.scan(folder)
        except TraversalError as e:
            self.log.error(e.message)
            ctx.errors.append(e)
            return

        ctx.errors.extend(listing.errors)

        files = listing.files
        parallel = ctx.params.parallel
        for i in range(0, len(files), parallel):
            self.process_batch(ctx, files[i:i + parallel])

        for subfolder in listing.subfolders:
            self.scan_folder(ctx, subfolder)

    def process_batch(self, ctx: RunContext, batch: List[FileEntry]) -> None:
        """Hashes a batch concurrently, waits for all of it, then registers in order."""
        pending = []
        for entry in batch:
            if ctx.index.contains(entry.path):
                self.log.debug(f"File already processed, skip: {entry.path}")
            else:
                pending.append(entry)

        futures = [ctx.executor.submit(ctx.hasher.hash, entry) for entry in pending]
        results = [future.result() for future in futures]

        for entry, result in zip(pending, results):
            self.process_file(ctx, entry, result)

    def process_file(self, ctx: RunContext, entry: FileEntry, result: HashResult) -> None:
        ctx.stats.files_hashed += 1

        if not result.ok:
            error = HashError(result.error or f"Error reading {entry.path}", path=entry.path)
            self.log.error(error.message)
            ctx.index.register_error(entry, error.message)
            ctx.errors.append(error)
            return

        registration = ctx.index.register(entry, result)
        if not registration.matched:
            if registration.record is not None:
                self.log.debug(f"File processed: {entry.path} - {result.digest}")
            return

        ctx.stats.duplicates += 1
        ctx.stats.reclaimable_bytes += entry.size

        error = ctx.policy.apply(entry.path, registration.record)
        if error is not None:
            ctx.errors.append(error)
        elif ctx.policy.deletes:
            ctx.stats.deleted += 1

    def end(self, ctx: RunContext, aborted: bool = False) -> RunResult:
        """Builds the report and final statistics."""
        report = ReportBuilder.build(ctx.index)

        stats = ctx.stats
        stats.distinct_files = sum(1 for record in ctx.index.records() if record.error is None)
        stats.errors = len(ctx.errors)
        stats.total_time = time.time() - ctx.start_time

        self.log.info(stats.summary())
        if stats.errors:
            self.log.info(f"{stats.errors} error(s) while scanning, see log above")

        return RunResult(report=report, stats=stats, errors=list(ctx.errors), aborted=aborted)
