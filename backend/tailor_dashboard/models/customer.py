"""Customer model."""

import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from tailor_dashboard.models.order import Order


class CustomerStatus(str, enum.Enum):
    ACTIVE = "active"
    CHURNED = "churned"
    PROSPECT = "prospect"


@dataclass
class Customer:
    id: str
    name: str
    email: str
    status: CustomerStatus
    created_at: datetime
    # Aggregates are computed once when the order graph is generated.
    revenue: float = 0.0
    order_count: int = 0
    last_order_date: datetime | None = None
    orders: list[Order] = field(default_factory=list, repr=False)

    @classmethod
    def with_orders(
        cls,
        *,
        id: str,
        name: str,
        email: str,
        status: CustomerStatus,
        created_at: datetime,
        orders: list[Order],
    ) -> "Customer":
        """Create a customer and derive its aggregate fields from ``orders``."""
        return cls(
            id=id,
            name=name,
            email=email,
            status=status,
            created_at=created_at,
            revenue=round(sum(o.total_amount for o in orders), 2),
            order_count=len(orders),
            last_order_date=orders[-1].order_date if orders else None,
            orders=orders,
        )

    def find_order(self, order_id: str) -> Order | None:
        return next((o for o in self.orders if o.order_id == order_id), None)

    def summary(self) -> dict[str, Any]:
        """Every field except the owned orders."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "status": self.status,
            "revenue": self.revenue,
            "created_at": self.created_at,
            "order_count": self.order_count,
            "last_order_date": self.last_order_date,
        }

    def __repr__(self) -> str:
        return f"<Customer {self.name}>"
