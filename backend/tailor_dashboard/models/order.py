"""Order, OrderItem & CustomSize models."""

import math
from dataclasses import dataclass, field
from datetime import datetime
from numbers import Real
from typing import Any

MEASUREMENT_FIELDS = ("chest", "waist", "hips")


@dataclass
class CustomSize:
    chest: float
    waist: float
    hips: float

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "CustomSize":
        """Build from a validated payload, dropping any extra keys."""
        return cls(**{name: payload[name] for name in MEASUREMENT_FIELDS})


def is_valid_custom_size(payload: Any) -> bool:
    """True when chest, waist and hips are all finite non-negative numbers."""
    if not isinstance(payload, dict):
        return False
    for name in MEASUREMENT_FIELDS:
        value = payload.get(name)
        # bool is a Real subclass but never a measurement
        if isinstance(value, bool) or not isinstance(value, Real):
            return False
        try:
            if not math.isfinite(value) or value < 0:
                return False
        except OverflowError:
            # int too large for a float
            return False
    return True


@dataclass
class OrderItem:
    order_item_id: str
    item_name: str
    category: str
    price: float
    custom_size: CustomSize

    def __repr__(self) -> str:
        return f"<OrderItem {self.order_item_id} {self.item_name!r}>"


@dataclass
class Order:
    order_id: str
    order_date: datetime
    total_amount: float
    items: list[OrderItem] = field(default_factory=list)

    def find_item(self, order_item_id: str) -> OrderItem | None:
        return next((i for i in self.items if i.order_item_id == order_item_id), None)

    def __repr__(self) -> str:
        return f"<Order {self.order_id} total={self.total_amount}>"
