"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON repositories,
the filesystem store and the Babel/jinja2 collaborators, but keep
everything in dicts and record what they were asked to do.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from pathlib import Path

from receipts.application.dto import ReceiptViewModel
from receipts.application.ports import ReceiptFormatter, ReceiptRenderer
from receipts.domain.exceptions import EntityNotFoundError
from receipts.domain.model.order import (
    Order,
    OrderCoupon,
    OrderFee,
    OrderLineItem,
    OrderNote,
    OrderTax,
)
from receipts.domain.model.product import Product
from receipts.domain.model.value_objects import Money, Quantity
from receipts.domain.repository.order_repository import OrderRepository
from receipts.domain.repository.product_repository import ProductRepository
from receipts.domain.repository.transient_file_store import TransientFileStore

TODAY = date(2026, 10, 19)


class FakeOrderRepository(OrderRepository):

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        self.meta_writes = 0
        for order in orders or []:
            self.save(order)

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self._next_id
            self._next_id += 1
        self._store[order.id] = order

    def save_meta_data(self, order: Order) -> None:
        if order.id not in self._store:
            raise EntityNotFoundError(f"Order #{order.id} not found")
        self._store[order.id].meta_data = dict(order.meta_data)
        self.meta_writes += 1


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product


class FakeTransientFileStore(TransientFileStore):
    """Keeps files in memory.  ``expire()`` simulates a file going away."""

    def __init__(self) -> None:
        self.files: dict[str, tuple[str, date]] = {}
        self._counter = 0

    def create_file(self, content: str, expires_on: date) -> str:
        self._counter += 1
        file_name = f"receipt-{self._counter}"
        self.files[file_name] = (content, expires_on)
        return file_name

    def get_file_path(self, file_name: str) -> Path | None:
        if file_name not in self.files:
            return None
        return Path("/transient") / file_name

    def expire(self, file_name: str) -> None:
        del self.files[file_name]


class FakeFormatter(ReceiptFormatter):

    def format_money(self, money: Money) -> str:
        return f"{money.currency} {money.amount:.2f}"

    def format_date(self, value: datetime) -> str:
        return value.date().isoformat()


class FakeRenderer(ReceiptRenderer):

    def __init__(self) -> None:
        self.rendered: list[ReceiptViewModel] = []

    def render(self, receipt: ReceiptViewModel) -> str:
        self.rendered.append(receipt)
        return f"<h1>{receipt.texts.receipt_title}</h1>"


# ── Sample data ──────────────────────────────────────────────────────────────


def sample_products() -> list[Product]:
    return [
        Product(id="10", name="Widget"),
        Product(id="20", name="Hoodie"),
        Product(id="21", name="Hoodie - L", parent_id="20", attributes={"Size": "L", "Color": "Blue"}),
    ]


def sample_order(currency: str = "USD") -> Order:
    """Two products, one fee, one coupon, shipping and two tax lines."""

    def m(amount: str) -> Money:
        return Money(Decimal(amount), currency)

    return Order(
        id=None,
        currency=currency,
        items=[
            OrderLineItem("10", "Widget", Quantity(2), subtotal=m("30.00"), total=m("27.00")),
            OrderLineItem("21", "Hoodie - L", Quantity(1), subtotal=m("50.00"), total=m("45.00")),
        ],
        fees=[OrderFee("Gift wrap", m("2.50"))],
        coupons=[OrderCoupon("SAVE10", m("8.00"))],
        taxes=[OrderTax("VAT", m("6.00")), OrderTax("City tax", m("1.20"))],
        shipping_total=m("5.00"),
        total=m("86.70"),
        payment_method_title="Credit card",
        date_created=datetime(2026, 10, 18, 9, 30, tzinfo=timezone.utc),
        date_paid=datetime(2026, 10, 18, 9, 45, tzinfo=timezone.utc),
        notes=[
            OrderNote("Internal: check stock", is_customer_note=False),
            OrderNote("Thanks for shopping!", is_customer_note=True),
            OrderNote("Your parcel ships Monday.", is_customer_note=True),
        ],
    )
