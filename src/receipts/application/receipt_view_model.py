"""Application service: build the receipt view model for an order.

The builder is a pure transformation: it reads the order (and the
catalog, to describe variations) and never writes anything.
"""

from __future__ import annotations

from markupsafe import Markup

from receipts.application.dto import (
    ReceiptLayout,
    ReceiptLineItem,
    ReceiptTexts,
    ReceiptViewModel,
)
from receipts.application.ports import ReceiptFormatter
from receipts.domain.model.order import Order, OrderLineItem
from receipts.domain.repository.product_repository import ProductRepository


class ReceiptViewModelBuilder:

    def __init__(
        self,
        product_repo: ProductRepository,
        formatter: ReceiptFormatter,
        store_name: str = "",
    ) -> None:
        self._product_repo = product_repo
        self._formatter = formatter
        self._store_name = store_name.strip()

    def build(self, order: Order) -> ReceiptViewModel:
        if self._store_name:
            receipt_title = f"Receipt from {self._store_name}"
        else:
            receipt_title = "Receipt"

        if order.id:
            summary_title = f"Summary: Order #{order.id}"
        else:
            summary_title = "Summary"

        money = self._formatter.format_money
        date = order.date_paid or order.date_created

        return ReceiptViewModel(
            layout=ReceiptLayout(),
            texts=ReceiptTexts(
                receipt_title=receipt_title,
                summary_section_title=summary_title,
            ),
            formatted_amount=money(order.total),
            formatted_date=self._formatter.format_date(date),
            line_items=tuple(self._line_items(order)),
            payment_method=order.payment_method_title,
            notes=tuple(note.content for note in order.customer_notes),
        )

    # --- Line items -----------------------------------------------------------

    def _line_items(self, order: Order) -> list[ReceiptLineItem]:
        """Summary rows, always in this order:

        products, subtotal, fees, discounts, shipping, taxes, amount paid.
        """
        money = self._formatter.format_money
        rows = [
            ReceiptLineItem(
                title=self._item_title(item),
                amount=money(item.total),
                quantity=item.quantity.value,
            )
            for item in order.items
        ]

        rows.append(ReceiptLineItem("Subtotal", money(order.subtotal)))

        for fee in order.fees:
            rows.append(ReceiptLineItem(fee.name or "Fee", money(fee.amount)))

        for coupon in order.coupons:
            rows.append(
                ReceiptLineItem(f"Discount ({coupon.code})", money(-coupon.discount))
            )

        rows.append(ReceiptLineItem("Shipping", money(order.shipping_total)))
        rows.append(ReceiptLineItem("Taxes", money(order.tax_total)))
        rows.append(ReceiptLineItem("Amount Paid", money(order.total)))
        return rows

    def _item_title(self, item: OrderLineItem) -> str:
        product = self._product_repo.get_by_id(item.product_id)
        if product is None:
            title = item.product_name
        elif product.is_variation:
            parent = self._product_repo.get_by_id(product.parent_id)  # type: ignore[arg-type]
            parent_name = parent.name if parent is not None else product.name
            title = f"{parent_name}. {product.attribute_summary}"
        else:
            title = product.name

        # Product names are store-editable and may contain markup.
        return Markup(title).striptags()
