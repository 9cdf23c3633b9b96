"""Customer schemas for API request/response."""

from datetime import datetime

from tailor_dashboard.models.customer import CustomerStatus
from tailor_dashboard.schemas.base import CamelModel


class CustomerSummary(CamelModel):
    id: str
    name: str
    email: str
    status: CustomerStatus
    revenue: float
    created_at: datetime
    order_count: int
    last_order_date: datetime | None


class Pagination(CamelModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int


class CustomerListResponse(CamelModel):
    customers: list[CustomerSummary]
    pagination: Pagination


class CustomerStatusUpdate(CamelModel):
    # Both optional here so a missing field reports the same message as an empty one
    customer_id: str | None = None
    status: str | None = None


class CustomerStatusUpdateResponse(CamelModel):
    message: str = "Customer status updated successfully"
    customer_id: str
    new_status: CustomerStatus
