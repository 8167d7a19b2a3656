"""Filesystem-backed implementation of TransientFileStore.

Files are grouped in one subdirectory per expiration date::

    <base_dir>/2026-10-20/7eaa14<32 random hex chars>

The first six characters of a file name encode its expiration date in
hex (3 digits year, 1 digit month, 2 digits day), so the path of a file
and whether it has expired can both be derived from the name alone.
"""

from __future__ import annotations

import re
import secrets
from datetime import date
from pathlib import Path
from typing import Callable

import structlog

from receipts.domain.exceptions import DirectoryUnavailableError, ValidationError
from receipts.domain.model.expiration import parse_expiration_date, utc_today
from receipts.domain.repository.transient_file_store import TransientFileStore

logger = structlog.get_logger(__name__)

_FILE_NAME = re.compile(r"^[0-9a-f]{38}$")
_DATE_DIR = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class FilesystemTransientFileStore(TransientFileStore):

    def __init__(self, base_dir: Path, today: Callable[[], date] = utc_today) -> None:
        self._base_dir = base_dir
        self._today = today

    # --- TransientFileStore interface -----------------------------------------

    def create_file(self, content: str, expires_on: date) -> str:
        expires_on = parse_expiration_date(expires_on, today=self._today())

        directory = self._base_dir / expires_on.isoformat()
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryUnavailableError(
                f"Can't create transient files directory {directory}: {exc}"
            ) from exc

        file_name = (
            f"{expires_on.year:03x}{expires_on.month:01x}{expires_on.day:02x}"
            f"{secrets.token_hex(16)}"
        )
        try:
            (directory / file_name).write_text(content, encoding="utf-8")
        except OSError as exc:
            raise DirectoryUnavailableError(
                f"Can't write transient file in {directory}: {exc}"
            ) from exc

        logger.debug("Transient file created", file_name=file_name, expires_on=expires_on.isoformat())
        return file_name

    def get_file_path(self, file_name: str) -> Path | None:
        try:
            expires_on = self.get_expiration_date(file_name)
        except ValidationError:
            return None
        if expires_on < self._today():
            return None

        path = self._base_dir / expires_on.isoformat() / file_name
        return path if path.is_file() else None

    # --- Expiration -----------------------------------------------------------

    @staticmethod
    def get_expiration_date(file_name: str) -> date:
        """Decode the expiration date from a transient file name.

        Raises ValidationError if the name isn't a valid transient file name.
        """
        if not _FILE_NAME.match(file_name):
            raise ValidationError(f"Invalid transient file name: {file_name!r}")
        try:
            return date(
                int(file_name[0:3], 16),
                int(file_name[3:4], 16),
                int(file_name[4:6], 16),
            )
        except ValueError as exc:
            raise ValidationError(f"Invalid transient file name: {file_name!r}") from exc

    def delete_expired_files(self, limit: int = 1000) -> int:
        """Delete up to *limit* files whose expiration date is before today.

        Directories left empty are removed too.  Returns the number of
        files deleted.
        """
        if not self._base_dir.is_dir():
            return 0

        today = self._today()
        deleted = 0
        for directory in sorted(self._base_dir.iterdir()):
            if deleted >= limit:
                break
            if not directory.is_dir() or not _DATE_DIR.match(directory.name):
                continue
            try:
                if date.fromisoformat(directory.name) >= today:
                    continue
            except ValueError:
                continue

            for path in sorted(directory.iterdir()):
                if deleted >= limit:
                    break
                if path.is_file():
                    path.unlink()
                    deleted += 1

            if not any(directory.iterdir()):
                directory.rmdir()

        logger.info("Expired transient files deleted", count=deleted)
        return deleted
