"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
File removal for confirmed duplicates: permanent delete or move to the system trash.
"""
import os
from send2trash import send2trash

from dedupr.core.errors import DeleteError


class FileService:
    """
    Cross-platform removal of duplicate files.
    Every failure is raised as DeleteError so callers handle a single type.
    """

    @staticmethod
    def delete_file(file_path: str):
        """Removes a file permanently. The bytes are not recoverable."""
        try:
            os.remove(file_path)
        except OSError as e:
            raise DeleteError(f"Could not delete {file_path}: {e}", path=file_path) from e

    @staticmethod
    def move_to_trash(file_path: str):
        """Moves a file to the system trash. A symlink is trashed itself, never its target."""
        path = os.path.abspath(file_path)

        if not os.path.lexists(path):
            raise DeleteError(f"File not found: {path}", path=file_path)

        try:
            send2trash(path)
        except Exception as e:
            raise DeleteError(f"Failed to move to trash: {e}", path=file_path) from e

    @classmethod
    def remove(cls, file_path: str, use_trash: bool = False):
        if use_trash:
            cls.move_to_trash(file_path)
        else:
            cls.delete_file(file_path)
