"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements folder listing for the depth-first traversal.
Features:
- Lists each folder exactly once
- Sorts entries by name (optionally reversed) so "first occurrence wins" is reproducible
- Applies the extension allow-list
- Separates files from subfolders; recursion itself is driven by the scheduler,
  which hashes all files of a folder before descending into its subfolders
"""

import os
import stat
import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

# Local imports
from dedupr.core.errors import EntryStatError, TraversalError
from dedupr.core.interfaces import FolderScanner
from dedupr.core.models import FileEntry, FolderListing


class FolderScannerImpl(FolderScanner):
    """
    Lists a single folder into ordered files and subfolders.

    Attributes:
        extensions: Allowed lowercase extensions without the leading dot (e.g., ["jpg", "png"]).
                    None or empty means every file is accepted.
        reverse: Process entries in descending name order instead of ascending.
    """

    def __init__(self, extensions: Optional[List[str]] = None, reverse: bool = False,
                 log: Optional[logging.Logger] = None):
        exts = [ext.lower().lstrip(".") for ext in extensions] if extensions else []
        self.extensions = [] if "*" in exts else exts
        self.reverse = reverse
        self.log = log or logger

    def scan(self, folder: str) -> FolderListing:
        """
        Returns the filtered files and the subfolders of `folder`.
        Raises TraversalError if the folder itself cannot be listed; a failing
        entry is only logged and recorded on the listing.
        """
        try:
            contents = os.listdir(folder)
        except OSError as e:
            raise TraversalError(f"Error reading {folder}: {e}", path=folder) from e

        self.log.debug(f"Folder {folder} has {len(contents)} objects")

        contents.sort(reverse=self.reverse)
        listing = FolderListing(folder=folder)

        for name in contents:
            path = os.path.join(folder, name)
            try:
                st = os.stat(path)
            except OSError as e:
                error = EntryStatError(f"Error parsing {path}: {e}", path=path)
                self.log.error(error.message)
                listing.errors.append(error)
                continue

            if stat.S_ISDIR(st.st_mode):
                if os.path.islink(path):
                    self.log.debug(f"Skipping symbolic link to directory: {path}")
                    continue
                listing.subfolders.append(path)
            elif not stat.S_ISREG(st.st_mode):
                self.log.debug(f"Skipping special file: {path}")
            elif self._extension_passes(name):
                listing.files.append(FileEntry(path=path, size=st.st_size))
            else:
                self.log.debug(f"File {path} does not have a valid extension, skip")

        return listing

    def _extension_passes(self, name: str) -> bool:
        """
        Check if file matches any of the allowed extensions.
        Args:
            name: File name (basename)
        Returns:
            True if no filter is set or the extension is allowed
        """
        if not self.extensions:
            return True
        ext = os.path.splitext(name)[1].lower().lstrip(".")
        return ext in self.extensions
