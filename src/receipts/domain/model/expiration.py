"""Expiration dates for transient files.

Callers may express an expiration as a ``date``, a ``datetime``, an ISO
``YYYY-MM-DD`` string or a POSIX timestamp.  All of them are normalized
to a UTC calendar date, and dates before *today* are rejected.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timezone

from receipts.domain.exceptions import InvalidExpirationError

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIMESTAMP = re.compile(r"^\d+$")

# Transient file names hold the year in three hex digits.
MAX_EXPIRATION_YEAR = 0xFFF

ExpirationInput = date | datetime | str | int | float


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def parse_expiration_date(value: ExpirationInput, today: date) -> date:
    """Normalize *value* to a date, rejecting malformed and past values.

    Raises InvalidExpirationError.  *today* itself is a valid expiration:
    the file stays available until the end of the day.
    """
    expires_on = _to_date(value)
    if expires_on < today:
        raise InvalidExpirationError(
            f"Expiration date {expires_on.isoformat()} is in the past"
        )
    if expires_on.year > MAX_EXPIRATION_YEAR:
        raise InvalidExpirationError(
            f"Expiration date {expires_on.isoformat()} is too far in the future "
            f"(latest year is {MAX_EXPIRATION_YEAR})"
        )
    return expires_on


def _to_date(value: ExpirationInput) -> date:
    # bool is an int subclass, and True is not a timestamp.
    if isinstance(value, bool):
        raise InvalidExpirationError(f"Invalid expiration date: {value!r}")

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, (int, float)):
        return _from_timestamp(value)

    if isinstance(value, str):
        text = value.strip()
        if _TIMESTAMP.match(text):
            return _from_timestamp(int(text))
        if _ISO_DATE.match(text):
            try:
                return date.fromisoformat(text)
            except ValueError as exc:
                raise InvalidExpirationError(
                    f"Invalid expiration date: {value!r}"
                ) from exc

    raise InvalidExpirationError(
        f"Invalid expiration date: {value!r} (expected YYYY-MM-DD or a timestamp)"
    )


def _from_timestamp(value: int | float) -> date:
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc).date()
    except (OverflowError, OSError, ValueError) as exc:
        raise InvalidExpirationError(f"Invalid expiration timestamp: {value!r}") from exc
