"""Application service: printable order receipts stored as transient files.

When a receipt is generated for an order, the name of the transient file
holding it is stored in the order's metadata (``RECEIPT_FILE_NAME_META_KEY``)
so later requests can reuse it.  Beware: the file a metadata entry points
to may have expired since.  ``get_existing_receipt`` re-checks the file
store on every call and returns None for such stale entries, which are
left in place rather than cleaned up.
"""

from __future__ import annotations

from datetime import date, timedelta
from pathlib import Path
from typing import Callable

import structlog

from receipts.application.ports import ReceiptRenderer
from receipts.application.receipt_view_model import ReceiptViewModelBuilder
from receipts.domain.model.expiration import (
    ExpirationInput,
    parse_expiration_date,
    utc_today,
)
from receipts.domain.model.order import Order
from receipts.domain.repository.order_repository import OrderRepository
from receipts.domain.repository.transient_file_store import TransientFileStore

logger = structlog.get_logger(__name__)

RECEIPT_FILE_NAME_META_KEY = "_receipt_file_name"


class ReceiptService:

    def __init__(
        self,
        order_repo: OrderRepository,
        file_store: TransientFileStore,
        view_model_builder: ReceiptViewModelBuilder,
        renderer: ReceiptRenderer,
        default_expiration_days: int = 1,
        today: Callable[[], date] = utc_today,
    ) -> None:
        self._order_repo = order_repo
        self._file_store = file_store
        self._view_model_builder = view_model_builder
        self._renderer = renderer
        self._default_expiration_days = default_expiration_days
        self._today = today

    def get_or_create_receipt(
        self,
        order_ref: int | Order,
        expiration_date: ExpirationInput | None = None,
        force_new: bool = False,
    ) -> str | None:
        """Get the receipt file name for an order, creating the file if necessary.

        Unless *force_new* is set, an existing and still available receipt
        is returned as is: nothing is rendered, written or saved.  Otherwise
        a new receipt file is created, expiring on *expiration_date*
        (default: ``default_expiration_days`` from today), and its name is
        stored in the order metadata.

        Returns None if *order_ref* is an ID of an order that doesn't exist,
        or an Order that was never stored.

        Raises:
            InvalidExpirationError: *expiration_date* is malformed or in the
                past.  Checked before anything else happens.
            DirectoryUnavailableError: the file store can't write the file.
        """
        today = self._today()
        if expiration_date is None:
            expires_on = today + timedelta(days=self._default_expiration_days)
        else:
            expires_on = parse_expiration_date(expiration_date, today=today)

        order = self._resolve(order_ref)
        if order is None:
            return None

        if not force_new:
            existing = self._existing_file_name(order)
            if existing is not None:
                logger.debug("Receipt reused", order_id=order.id, file_name=existing)
                return existing

        document = self._renderer.render(self._view_model_builder.build(order))
        file_name = self._file_store.create_file(document, expires_on)

        order.update_meta(RECEIPT_FILE_NAME_META_KEY, file_name)
        self._order_repo.save_meta_data(order)

        logger.info(
            "Receipt generated",
            order_id=order.id,
            file_name=file_name,
            expires_on=expires_on.isoformat(),
            forced=force_new,
        )
        return file_name

    def get_existing_receipt(self, order_ref: int | Order) -> str | None:
        """Return the file name of an available receipt for the order, or None.

        A receipt is available if the order metadata names a receipt file
        AND the file store still has that file.
        """
        order = self._resolve(order_ref)
        if order is None:
            return None
        return self._existing_file_name(order)

    def get_receipt_path(self, order_ref: int | Order) -> Path | None:
        """Like ``get_existing_receipt`` but return the receipt file path."""
        file_name = self.get_existing_receipt(order_ref)
        if file_name is None:
            return None
        return self._file_store.get_file_path(file_name)

    # --- Internal helpers -----------------------------------------------------

    def _resolve(self, order_ref: int | Order) -> Order | None:
        if isinstance(order_ref, Order):
            # The receipt pointer can only be recorded on a stored order.
            if order_ref.id is None or self._order_repo.get_by_id(order_ref.id) is None:
                logger.debug("Order not stored", order_id=order_ref.id)
                return None
            return order_ref
        order = self._order_repo.get_by_id(order_ref)
        if order is None:
            logger.debug("Order not found", order_id=order_ref)
        return order

    def _existing_file_name(self, order: Order) -> str | None:
        file_name = order.get_meta(RECEIPT_FILE_NAME_META_KEY)
        if not file_name:
            return None
        if self._file_store.get_file_path(file_name) is None:
            logger.debug("Receipt file gone", order_id=order.id, file_name=file_name)
            return None
        return file_name
