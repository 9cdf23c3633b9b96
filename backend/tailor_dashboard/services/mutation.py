"""Status and measurement updates: validate, then delegate to the store."""

import logging
from typing import Any

from tailor_dashboard.core.exceptions import Internal, InvalidArgument, NotFound
from tailor_dashboard.db.store import CustomerStore
from tailor_dashboard.models.customer import CustomerStatus
from tailor_dashboard.models.order import CustomSize, OrderItem, is_valid_custom_size

logger = logging.getLogger(__name__)

VALID_STATUSES = [s.value for s in CustomerStatus]


class MutationService:
    def __init__(self, store: CustomerStore):
        self.store = store

    def set_customer_status(self, customer_id: str, status: Any) -> CustomerStatus:
        if status not in VALID_STATUSES:
            raise InvalidArgument(
                f"Invalid status. Must be one of: {', '.join(VALID_STATUSES)}"
            )
        new_status = CustomerStatus(status)
        if not self.store.update_status(customer_id, new_status):
            logger.warning("Status update for unknown customer %s", customer_id)
            raise NotFound("Customer not found")
        return new_status

    def set_order_item_size(
        self, customer_id: str, order_id: str, order_item_id: str, size: Any
    ) -> OrderItem:
        """Replace one item's measurements. Price and totals are untouched."""
        if not is_valid_custom_size(size):
            raise InvalidArgument(
                "Invalid customSize format. Expected non-negative numbers "
                "for chest, waist, and hips."
            )
        new_size = CustomSize.from_payload(size)
        if not self.store.update_order_item_size(customer_id, order_id, order_item_id, new_size):
            logger.warning(
                "Size update miss: customer=%s order=%s item=%s",
                customer_id, order_id, order_item_id,
            )
            raise NotFound("Customer, order, or order item not found")

        logger.info("Updated order item %s with new measurements: %s", order_item_id, new_size)
        item = self.store.find_order_item(customer_id, order_id, order_item_id)
        if item is None:
            raise Internal(f"Order item {order_item_id} vanished after update")
        return item
