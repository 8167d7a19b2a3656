"""Unit tests for the receipt view model builder."""

from datetime import datetime, timezone

import pytest

from receipts.application.dto import ReceiptLayout
from receipts.application.receipt_view_model import ReceiptViewModelBuilder
from receipts.domain.model.order import Order, OrderCoupon, OrderFee, OrderLineItem
from receipts.domain.model.product import Product
from receipts.domain.model.value_objects import Money, Quantity
from receipts.infrastructure.formatting.babel_formatter import BabelFormatter
from tests.fakes import FakeFormatter, FakeProductRepository, sample_order, sample_products


def _builder(store_name="Acme", products=None, formatter=None):
    return ReceiptViewModelBuilder(
        FakeProductRepository(sample_products() if products is None else products),
        formatter or FakeFormatter(),
        store_name=store_name,
    )


class TestTitles:

    def test_receipt_title_with_store_name(self):
        vm = _builder().build(sample_order())
        assert vm.texts.receipt_title == "Receipt from Acme"

    def test_receipt_title_without_store_name(self):
        vm = _builder(store_name="").build(sample_order())
        assert vm.texts.receipt_title == "Receipt"

    def test_summary_title_with_order_id(self):
        order = sample_order()
        order.id = 42
        vm = _builder().build(order)
        assert vm.texts.summary_section_title == "Summary: Order #42"

    def test_summary_title_without_order_id(self):
        vm = _builder().build(sample_order())
        assert vm.texts.summary_section_title == "Summary"

    def test_section_titles(self):
        texts = _builder().build(sample_order()).texts
        assert texts.amount_paid_section_title == "Amount Paid"
        assert texts.date_paid_section_title == "Date Paid"
        assert texts.payment_method_section_title == "Payment method"
        assert texts.order_notes_section_title == "Notes"


class TestLineItems:

    def test_order_and_content(self):
        vm = _builder().build(sample_order())

        assert [(li.title, li.amount) for li in vm.line_items] == [
            ("Widget", "USD 27.00"),
            ("Hoodie. Size: L, Color: Blue", "USD 45.00"),
            ("Subtotal", "USD 80.00"),
            ("Gift wrap", "USD 2.50"),
            ("Discount (SAVE10)", "USD -8.00"),
            ("Shipping", "USD 5.00"),
            ("Taxes", "USD 7.20"),
            ("Amount Paid", "USD 86.70"),
        ]

    def test_quantities_on_product_rows_only(self):
        vm = _builder().build(sample_order())
        assert [li.quantity for li in vm.line_items] == [2, 1, None, None, None, None, None, None]

    def test_unnamed_fee(self):
        order = sample_order()
        order.fees = [OrderFee("", Money.of("1.00"))]
        vm = _builder().build(order)
        assert vm.line_items[3].title == "Fee"

    def test_multiple_coupons_keep_order(self):
        order = sample_order()
        order.coupons = [OrderCoupon("A", Money.of("1")), OrderCoupon("B", Money.of("2"))]
        titles = [li.title for li in _builder().build(order).line_items]
        assert titles[4:6] == ["Discount (A)", "Discount (B)"]

    def test_removed_product_uses_snapshot_name(self):
        vm = _builder(products=[]).build(sample_order())
        assert vm.line_items[0].title == "Widget"
        assert vm.line_items[1].title == "Hoodie - L"

    def test_markup_stripped_from_titles(self):
        products = [Product(id="10", name="<b>Bold</b> Widget")]
        vm = _builder(products=products).build(sample_order())
        assert vm.line_items[0].title == "Bold Widget"

    def test_no_taxes_or_shipping(self):
        order = Order(
            id=7,
            currency="USD",
            items=[OrderLineItem("10", "Widget", Quantity(1), Money.of("5"), Money.of("5"))],
            total=Money.of("5"),
        )
        rows = {li.title: li.amount for li in _builder().build(order).line_items}
        assert rows["Shipping"] == "USD 0.00"
        assert rows["Taxes"] == "USD 0.00"

    def test_amounts_in_order_currency(self):
        vm = _builder(formatter=BabelFormatter("en_US")).build(sample_order("EUR"))

        assert vm.formatted_amount == "€86.70"
        assert vm.line_items[0].amount == "€27.00"
        assert vm.line_items[4].amount == "-€8.00"


class TestOtherFields:

    def test_formatted_amount_is_total(self):
        assert _builder().build(sample_order()).formatted_amount == "USD 86.70"

    def test_date_paid_preferred(self):
        assert _builder().build(sample_order()).formatted_date == "2026-10-18"

    def test_date_created_when_unpaid(self):
        order = sample_order()
        order.date_paid = None
        order.date_created = datetime(2026, 10, 17, 8, 0, tzinfo=timezone.utc)
        assert _builder().build(order).formatted_date == "2026-10-17"

    def test_payment_method(self):
        assert _builder().build(sample_order()).payment_method == "Credit card"

    def test_only_customer_notes_in_order(self):
        vm = _builder().build(sample_order())
        assert vm.notes == ("Thanks for shopping!", "Your parcel ships Monday.")

    def test_card_details_unset(self):
        assert _builder().build(sample_order()).card is None

    def test_layout_constants(self):
        layout = _builder().build(sample_order()).layout
        assert layout == ReceiptLayout()
        assert layout.font_size == 12
        assert layout.line_height == 18
        assert layout.icon_height == 18
        assert layout.icon_width == pytest.approx(24)
