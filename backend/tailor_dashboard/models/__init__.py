"""Domain models for the tailor dashboard."""

from tailor_dashboard.models.customer import Customer, CustomerStatus
from tailor_dashboard.models.order import (
    CustomSize,
    Order,
    OrderItem,
    is_valid_custom_size,
)

__all__ = [
    "Customer",
    "CustomerStatus",
    "CustomSize",
    "Order",
    "OrderItem",
    "is_valid_custom_size",
]
