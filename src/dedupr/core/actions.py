"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/actions.py
What happens to a file once it is confirmed as a duplicate.

The first-seen path of a record is never touched; only later matches are
deleted. A match that resolves to the same file as the original, through a
symlink on either side, is refused. A failed deletion is logged and returned,
the path stays recorded as a duplicate either way.
"""

import logging
import os
from typing import Optional

from dedupr.core.errors import DeleteError
from dedupr.core.interfaces import ActionPolicy
from dedupr.core.models import FileRecord
from dedupr.services.file_service import FileService

logger = logging.getLogger(__name__)


class RecordOnlyPolicy(ActionPolicy):
    """Only logs the duplicate."""
    deletes = False

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    def apply(self, path: str, record: FileRecord) -> Optional[DeleteError]:
        if len(record.duplicates) == 1:
            self.log.info(f"File has duplicate(s): {record.file} - {record.hash}")
        self.log.debug(f"Duplicate found: {path} - {record.hash}")
        return None


class DeletePolicy(ActionPolicy):
    """Removes the duplicate from storage, permanently or via the system trash."""
    deletes = True

    def __init__(self, use_trash: bool = False, log: Optional[logging.Logger] = None):
        self.use_trash = use_trash
        self.log = log or logger

    def apply(self, path: str, record: FileRecord) -> Optional[DeleteError]:
        if path == record.file:
            # Never remove the original
            error = DeleteError(f"Refusing to delete original file {path}", path=path)
            self.log.error(error.message)
            return error

        if os.path.realpath(path) == os.path.realpath(record.file):
            # A symlink between the two: removing either side loses the original
            error = DeleteError(f"Refusing to delete {path}, it is the same file as {record.file}", path=path)
            self.log.error(error.message)
            return error

        try:
            FileService.remove(path, use_trash=self.use_trash)
        except DeleteError as e:
            self.log.error(e.message)
            return e

        verb = "trashed" if self.use_trash else "deleted"
        self.log.info(f"Duplicate {verb}: {path} - {record.hash}")
        return None


def make_policy(delete: bool, use_trash: bool = False, log: Optional[logging.Logger] = None) -> ActionPolicy:
    if delete:
        return DeletePolicy(use_trash=use_trash, log=log)
    return RecordOnlyPolicy(log=log)
