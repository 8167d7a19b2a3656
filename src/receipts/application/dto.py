"""Data Transfer Objects — plain containers that cross layer boundaries.

The receipt view model is everything a renderer needs to produce a
receipt document.  It is built per request and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass

FONT_SIZE = 12
LINE_HEIGHT = FONT_SIZE * 1.5


@dataclass(frozen=True)
class ReceiptLayout:
    """Typographic constants used by the receipt template (in px)."""

    font_size: int = FONT_SIZE
    margin: int = 16
    title_font_size: int = 24
    footer_font_size: int = 10
    line_height: float = LINE_HEIGHT
    icon_height: float = LINE_HEIGHT
    icon_width: float = LINE_HEIGHT * (4 / 3)


@dataclass(frozen=True)
class ReceiptTexts:
    receipt_title: str
    summary_section_title: str
    amount_paid_section_title: str = "Amount Paid"
    date_paid_section_title: str = "Date Paid"
    payment_method_section_title: str = "Payment method"
    order_notes_section_title: str = "Notes"


@dataclass(frozen=True)
class ReceiptLineItem:
    """One row of the receipt summary table.

    ``quantity`` is set for product rows only; totals rows leave it empty.
    """

    title: str
    amount: str  # formatted, e.g. "$15.00"
    quantity: int | None = None


@dataclass(frozen=True)
class PaymentCardDetails:
    brand: str
    last_four: str


@dataclass(frozen=True)
class ReceiptViewModel:
    layout: ReceiptLayout
    texts: ReceiptTexts
    formatted_amount: str
    formatted_date: str
    line_items: tuple[ReceiptLineItem, ...]
    payment_method: str
    notes: tuple[str, ...]
    # Card brand and last digits have no data source yet.
    card: PaymentCardDetails | None = None
