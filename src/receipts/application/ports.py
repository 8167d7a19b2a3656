"""Ports for the presentation collaborators of the receipt service.

Concrete implementations (Babel, jinja2) live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from receipts.application.dto import ReceiptViewModel
from receipts.domain.model.value_objects import Money


class ReceiptFormatter(ABC):

    @abstractmethod
    def format_money(self, money: Money) -> str:
        """Format an amount in its own currency, e.g. ``"$1,234.50"``."""

    @abstractmethod
    def format_date(self, value: datetime) -> str:
        """Format a date for display, e.g. ``"October 19, 2026"``."""


class ReceiptRenderer(ABC):

    @abstractmethod
    def render(self, receipt: ReceiptViewModel) -> str:
        """Render the receipt view model into a complete document."""
