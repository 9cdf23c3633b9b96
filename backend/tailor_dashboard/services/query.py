"""Customer query pipeline: filter → sort → paginate → project."""

import enum
import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field

from tailor_dashboard.core.exceptions import InvalidArgument, NotFound
from tailor_dashboard.db.store import CustomerStore
from tailor_dashboard.models.customer import Customer
from tailor_dashboard.models.order import Order

logger = logging.getLogger(__name__)


class SortKey(str, enum.Enum):
    """Sortable summary fields, named as the client sends them."""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    STATUS = "status"
    REVENUE = "revenue"
    ORDER_COUNT = "orderCount"
    LAST_ORDER_DATE = "lastOrderDate"
    CREATED_AT = "createdAt"


class SortDirection(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"


def _text(value: str) -> str:
    return value.lower()


# Each entry returns the comparable value, or None to sort last.
SORT_FIELDS: dict[SortKey, Callable[[Customer], Any]] = {
    SortKey.ID: lambda c: _text(c.id),
    SortKey.NAME: lambda c: _text(c.name),
    SortKey.EMAIL: lambda c: _text(c.email),
    SortKey.STATUS: lambda c: _text(c.status.value),
    SortKey.REVENUE: lambda c: c.revenue,
    SortKey.ORDER_COUNT: lambda c: c.order_count,
    SortKey.LAST_ORDER_DATE: lambda c: c.last_order_date,
    SortKey.CREATED_AT: lambda c: c.created_at,
}


def parse_sort_key(raw: str) -> SortKey:
    try:
        return SortKey(raw)
    except ValueError:
        allowed = ", ".join(k.value for k in SortKey)
        raise InvalidArgument(f"Invalid sortBy '{raw}'. Must be one of: {allowed}")


def parse_sort_direction(raw: str) -> SortDirection:
    try:
        return SortDirection(raw)
    except ValueError:
        raise InvalidArgument(f"Invalid order '{raw}'. Must be one of: asc, desc")


class CustomerQuery(BaseModel):
    page: int = Field(1, ge=1)
    limit: int = Field(..., ge=1)
    sort_by: SortKey = SortKey.NAME
    order: SortDirection = SortDirection.ASC
    search: str = ""


@dataclass
class QueryResult:
    items: list[dict[str, Any]]
    total_items: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.limit)


def filter_customers(customers: Sequence[Customer], search: str) -> list[Customer]:
    """Case-insensitive substring match on name or email; empty search keeps all."""
    if not search:
        return list(customers)
    needle = search.lower()
    return [c for c in customers if needle in c.name.lower() or needle in c.email.lower()]


def sort_customers(
    customers: Sequence[Customer], sort_by: SortKey, order: SortDirection
) -> list[Customer]:
    """Stable sort; values that are None go last in either direction."""
    key = SORT_FIELDS[sort_by]
    present = [c for c in customers if key(c) is not None]
    missing = [c for c in customers if key(c) is None]
    # list.sort stays stable with reverse=True: ties keep input order
    present.sort(key=key, reverse=order is SortDirection.DESC)
    return present + missing


def paginate(customers: Sequence[Customer], page: int, limit: int) -> list[Customer]:
    start = (page - 1) * limit
    return list(customers[start:start + limit])


def query_customers(customers: Sequence[Customer], params: CustomerQuery) -> QueryResult:
    filtered = filter_customers(customers, params.search)
    ordered = sort_customers(filtered, params.sort_by, params.order)
    page = paginate(ordered, params.page, params.limit)
    return QueryResult(
        items=[c.summary() for c in page],
        total_items=len(filtered),
        page=params.page,
        limit=params.limit,
    )


class QueryService:
    """Read side over a ``CustomerStore``."""

    def __init__(self, store: CustomerStore):
        self.store = store

    def list_customers(self, params: CustomerQuery) -> QueryResult:
        result = query_customers(self.store.list_all(), params)
        logger.info(
            "Returning %d customers (page %d of %d)",
            len(result.items), result.page, result.total_pages,
        )
        return result

    def get_orders(self, customer_id: str) -> list[Order]:
        customer = self.store.resolve(customer_id)
        if customer is None:
            logger.warning("Customer %s not found", customer_id)
            raise NotFound("Customer not found")
        logger.info("Found customer %s with %d orders", customer.name, len(customer.orders))
        return customer.orders
