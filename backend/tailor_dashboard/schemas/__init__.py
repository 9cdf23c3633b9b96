from tailor_dashboard.schemas.customer import (
    CustomerSummary, Pagination, CustomerListResponse,
    CustomerStatusUpdate, CustomerStatusUpdateResponse,
)
from tailor_dashboard.schemas.order import (
    CustomSizeSchema, OrderItemResponse, OrderResponse, OrderListResponse,
    OrderItemSizeUpdate, OrderItemSizeUpdateResponse,
)

__all__ = [
    "CustomerSummary", "Pagination", "CustomerListResponse",
    "CustomerStatusUpdate", "CustomerStatusUpdateResponse",
    "CustomSizeSchema", "OrderItemResponse", "OrderResponse", "OrderListResponse",
    "OrderItemSizeUpdate", "OrderItemSizeUpdateResponse",
]
