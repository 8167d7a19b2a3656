"""Order aggregate.

The Order owns its line items, fees, coupons, taxes and notes.  Totals
are stored as the store computed them at checkout; only the subtotal
and the tax total are derived here.

Orders also carry a free-form ``meta_data`` mapping, used by services
that need to remember something about an order (e.g. the name of the
last receipt file generated for it).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from receipts.domain.exceptions import ValidationError
from receipts.domain.model.value_objects import Money, Quantity


@dataclass
class OrderLineItem:
    """A purchased product.

    ``product_name`` is a snapshot taken when the order was placed, so the
    line can still be described if the product leaves the catalog.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    subtotal: Money  # before discounts
    total: Money


@dataclass(frozen=True)
class OrderFee:
    name: str
    amount: Money


@dataclass(frozen=True)
class OrderCoupon:
    code: str
    discount: Money


@dataclass(frozen=True)
class OrderTax:
    label: str
    tax_total: Money


@dataclass(frozen=True)
class OrderNote:
    content: str
    is_customer_note: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class Order:
    """Aggregate root for purchase orders.

    Invariant: every monetary amount is expressed in ``currency``.
    """

    id: int | None
    currency: str
    items: list[OrderLineItem]
    total: Money
    shipping_total: Money | None = None
    fees: list[OrderFee] = field(default_factory=list)
    coupons: list[OrderCoupon] = field(default_factory=list)
    taxes: list[OrderTax] = field(default_factory=list)
    payment_method_title: str = ""
    date_created: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    date_paid: datetime | None = None
    notes: list[OrderNote] = field(default_factory=list)
    meta_data: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.currency = self.currency.upper()
        if self.shipping_total is None:
            self.shipping_total = Money.zero(self.currency)

        amounts = [self.total, self.shipping_total]
        amounts += [m for item in self.items for m in (item.subtotal, item.total)]
        amounts += [fee.amount for fee in self.fees]
        amounts += [coupon.discount for coupon in self.coupons]
        amounts += [tax.tax_total for tax in self.taxes]
        for amount in amounts:
            if amount.currency != self.currency:
                raise ValidationError(
                    f"Order #{self.id} is in {self.currency}, "
                    f"got an amount in {amount.currency}"
                )

    # --- Computed properties --------------------------------------------------

    @property
    def subtotal(self) -> Money:
        result = Money.zero(self.currency)
        for item in self.items:
            result = result + item.subtotal
        return result

    @property
    def tax_total(self) -> Money:
        result = Money.zero(self.currency)
        for tax in self.taxes:
            result = result + tax.tax_total
        return result

    @property
    def customer_notes(self) -> list[OrderNote]:
        """Notes the customer is allowed to see, in the order they were stored."""
        return [note for note in self.notes if note.is_customer_note]

    # --- Metadata -------------------------------------------------------------

    def get_meta(self, key: str) -> str:
        """Return the metadata value for *key*, or ``""`` if unset."""
        return self.meta_data.get(key, "")

    def update_meta(self, key: str, value: str) -> None:
        self.meta_data[key] = value
