"""Locale-aware money and date formatting using Babel."""

from __future__ import annotations

from datetime import datetime

from babel import Locale
from babel.core import UnknownLocaleError
from babel.dates import format_date
from babel.numbers import format_currency

from receipts.application.ports import ReceiptFormatter
from receipts.domain.exceptions import ValidationError
from receipts.domain.model.value_objects import Money


class BabelFormatter(ReceiptFormatter):

    def __init__(self, locale: str = "en_US") -> None:
        try:
            self._locale = Locale.parse(locale)
        except (UnknownLocaleError, ValueError) as exc:
            raise ValidationError(f"Unknown locale: {locale!r}") from exc

    def format_money(self, money: Money) -> str:
        return format_currency(money.amount, money.currency, locale=self._locale)

    def format_date(self, value: datetime) -> str:
        return format_date(value.date(), format="long", locale=self._locale)
