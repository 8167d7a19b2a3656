"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from receipts.domain.exceptions import EntityNotFoundError
from receipts.domain.model.order import (
    Order,
    OrderCoupon,
    OrderFee,
    OrderLineItem,
    OrderNote,
    OrderTax,
)
from receipts.domain.model.value_objects import Money, Quantity
from receipts.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def save(self, order: Order) -> None:
        orders = self._load_raw()

        if order.id is None:
            order.id = max((o["id"] for o in orders), default=0) + 1

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                break
        else:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)

    def save_meta_data(self, order: Order) -> None:
        orders = self._load_raw()
        for raw in orders:
            if order.id is not None and raw["id"] == order.id:
                raw["meta_data"] = dict(order.meta_data)
                self._persist_raw(orders)
                return
        raise EntityNotFoundError(f"Order #{order.id} not found")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "currency": order.currency,
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "quantity": item.quantity.value,
                    "subtotal": str(item.subtotal.amount),
                    "total": str(item.total.amount),
                }
                for item in order.items
            ],
            "fees": [{"name": f.name, "amount": str(f.amount.amount)} for f in order.fees],
            "coupons": [
                {"code": c.code, "discount": str(c.discount.amount)} for c in order.coupons
            ],
            "taxes": [
                {"label": t.label, "tax_total": str(t.tax_total.amount)} for t in order.taxes
            ],
            "shipping_total": str(order.shipping_total.amount),  # type: ignore[union-attr]
            "total": str(order.total.amount),
            "payment_method_title": order.payment_method_title,
            "date_created": order.date_created.isoformat(),
            "date_paid": order.date_paid.isoformat() if order.date_paid else None,
            "notes": [
                {
                    "content": n.content,
                    "is_customer_note": n.is_customer_note,
                    "created_at": n.created_at.isoformat(),
                }
                for n in order.notes
            ],
            "meta_data": dict(order.meta_data),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", "USD").upper()

        def money(value: str) -> Money:
            return Money(Decimal(value), currency)

        items = [
            OrderLineItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=Quantity(i["quantity"]),
                subtotal=money(i.get("subtotal", i["total"])),
                total=money(i["total"]),
            )
            for i in raw["items"]
        ]
        date_paid = raw.get("date_paid")
        return Order(
            id=raw["id"],
            currency=currency,
            items=items,
            total=money(raw["total"]),
            shipping_total=money(raw.get("shipping_total", "0")),
            fees=[OrderFee(f["name"], money(f["amount"])) for f in raw.get("fees", [])],
            coupons=[
                OrderCoupon(c["code"], money(c["discount"])) for c in raw.get("coupons", [])
            ],
            taxes=[OrderTax(t["label"], money(t["tax_total"])) for t in raw.get("taxes", [])],
            payment_method_title=raw.get("payment_method_title", ""),
            date_created=datetime.fromisoformat(raw["date_created"]),
            date_paid=datetime.fromisoformat(date_paid) if date_paid else None,
            notes=[
                OrderNote(
                    content=n["content"],
                    is_customer_note=n.get("is_customer_note", False),
                    created_at=datetime.fromisoformat(n["created_at"]),
                )
                for n in raw.get("notes", [])
            ],
            meta_data=dict(raw.get("meta_data", {})),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
