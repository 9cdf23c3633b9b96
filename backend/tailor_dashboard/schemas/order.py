"""Order schemas for API request/response."""

from datetime import datetime
from typing import Any

from tailor_dashboard.schemas.base import CamelModel


class CustomSizeSchema(CamelModel):
    # int | float keeps whole-number measurements as sent
    chest: int | float
    waist: int | float
    hips: int | float


class OrderItemResponse(CamelModel):
    order_item_id: str
    item_name: str
    category: str
    price: float
    custom_size: CustomSizeSchema


class OrderResponse(CamelModel):
    order_id: str
    order_date: datetime
    total_amount: float
    items: list[OrderItemResponse]


class OrderListResponse(CamelModel):
    orders: list[OrderResponse]


class OrderItemSizeUpdate(CamelModel):
    order_id: str | None = None
    order_item_id: str | None = None
    # Validated by the mutation service, not coerced here
    custom_size: Any = None


class OrderItemSizeUpdateResponse(CamelModel):
    message: str = "Order item updated successfully"
    updated_item: OrderItemResponse
