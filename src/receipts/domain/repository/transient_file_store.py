"""Abstract store for transient (expiring) files.

A transient file is written once with an expiration date and is
identified afterwards only by its name.  Once the expiration date has
passed the file may disappear at any time, so callers must always ask
the store whether a name still resolves to a file.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from pathlib import Path


class TransientFileStore(ABC):

    @abstractmethod
    def create_file(self, content: str, expires_on: date) -> str:
        """Store *content* until *expires_on* and return the new file name.

        Raises InvalidExpirationError for past dates and
        DirectoryUnavailableError if the file can't be written.
        """

    @abstractmethod
    def get_file_path(self, file_name: str) -> Path | None:
        """Return the path of a live file, or None if missing or expired."""
