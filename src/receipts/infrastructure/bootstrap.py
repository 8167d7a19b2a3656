"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from receipts.application.receipt_service import ReceiptService
from receipts.application.receipt_view_model import ReceiptViewModelBuilder
from receipts.infrastructure.formatting.babel_formatter import BabelFormatter
from receipts.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from receipts.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from receipts.infrastructure.rendering.jinja_renderer import JinjaReceiptRenderer
from receipts.infrastructure.settings import Settings, get_settings
from receipts.infrastructure.storage.filesystem_transient_file_store import (
    FilesystemTransientFileStore,
)


def product_repository(settings: Settings | None = None) -> JsonProductRepository:
    settings = settings or get_settings()
    return JsonProductRepository(settings.data_dir / "products.json")


def order_repository(settings: Settings | None = None) -> JsonOrderRepository:
    settings = settings or get_settings()
    return JsonOrderRepository(settings.data_dir / "orders.json")


def transient_file_store(settings: Settings | None = None) -> FilesystemTransientFileStore:
    settings = settings or get_settings()
    return FilesystemTransientFileStore(settings.resolved_transient_files_dir)


def receipt_service(settings: Settings | None = None) -> ReceiptService:
    settings = settings or get_settings()
    builder = ReceiptViewModelBuilder(
        product_repo=product_repository(settings),
        formatter=BabelFormatter(settings.locale),
        store_name=settings.store_name,
    )
    return ReceiptService(
        order_repo=order_repository(settings),
        file_store=transient_file_store(settings),
        view_model_builder=builder,
        renderer=JinjaReceiptRenderer(),
        default_expiration_days=settings.default_expiration_days,
    )
