"""In-memory customer store.

The store owns the process-wide customer collection. It is built once by
the app factory and injected into the services; tests build a fresh one
per case. Every public operation holds the lock, so a find → mutate
sequence cannot interleave with another request under a threaded server.
"""

import logging
import threading
from collections.abc import Callable, Iterable

from tailor_dashboard.core.exceptions import InvalidArgument
from tailor_dashboard.db.seed import generate_fallback_customer
from tailor_dashboard.models.customer import Customer, CustomerStatus
from tailor_dashboard.models.order import CustomSize, OrderItem

logger = logging.getLogger(__name__)


class CustomerStore:
    def __init__(
        self,
        customers: Iterable[Customer] = (),
        *,
        allow_fallback_creation: bool = True,
        fallback_factory: Callable[[str], Customer] = generate_fallback_customer,
    ):
        self.allow_fallback_creation = allow_fallback_creation
        self._fallback_factory = fallback_factory
        self._lock = threading.RLock()
        self._customers: list[Customer] = []
        self._by_id: dict[str, Customer] = {}
        for customer in customers:
            self.add(customer)

    def __len__(self) -> int:
        with self._lock:
            return len(self._customers)

    def add(self, customer: Customer) -> Customer:
        with self._lock:
            if customer.id in self._by_id:
                raise InvalidArgument(f"Customer {customer.id} already exists")
            self._customers.append(customer)
            self._by_id[customer.id] = customer
            return customer

    def list_all(self) -> list[Customer]:
        """Snapshot of the collection in insertion order; records are live."""
        with self._lock:
            return list(self._customers)

    def find_by_id(self, customer_id: str) -> Customer | None:
        with self._lock:
            return self._by_id.get(customer_id)

    def get_or_create(self, customer_id: str) -> Customer:
        """Return the customer, synthesizing and inserting one on a miss."""
        with self._lock:
            customer = self._by_id.get(customer_id)
            if customer is not None:
                return customer

            logger.info(
                "Customer %s not found (%d in store), creating fallback",
                customer_id,
                len(self._customers),
            )
            return self.add(self._fallback_factory(customer_id))

    def resolve(self, customer_id: str) -> Customer | None:
        """Lookup honouring ``allow_fallback_creation``."""
        if self.allow_fallback_creation:
            return self.get_or_create(customer_id)
        return self.find_by_id(customer_id)

    def update_status(self, customer_id: str, new_status: CustomerStatus) -> bool:
        with self._lock:
            customer = self._by_id.get(customer_id)
            if customer is None:
                return False
            customer.status = new_status
            logger.info("Updated customer %s status to %s", customer.name, new_status)
            return True

    def find_order_item(
        self, customer_id: str, order_id: str, order_item_id: str
    ) -> OrderItem | None:
        with self._lock:
            customer = self._by_id.get(customer_id)
            if customer is None:
                return None
            order = customer.find_order(order_id)
            if order is None:
                return None
            return order.find_item(order_item_id)

    def update_order_item_size(
        self, customer_id: str, order_id: str, order_item_id: str, size: CustomSize
    ) -> bool:
        with self._lock:
            item = self.find_order_item(customer_id, order_id, order_item_id)
            if item is None:
                return False
            item.custom_size = size
            return True
