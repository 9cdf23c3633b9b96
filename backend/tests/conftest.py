"""Shared fixtures: a small, fully deterministic customer collection."""

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from tailor_dashboard.db.store import CustomerStore
from tailor_dashboard.main import create_app
from tailor_dashboard.models.customer import Customer, CustomerStatus
from tailor_dashboard.models.order import CustomSize, Order, OrderItem

NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)

STATUS_CYCLE = [CustomerStatus.ACTIVE, CustomerStatus.CHURNED, CustomerStatus.PROSPECT]


def make_item(item_id, price, *, name="Custom Wool Suit", category="Suits", size=(36, 30, 38)):
    chest, waist, hips = size
    return OrderItem(
        order_item_id=item_id,
        item_name=name,
        category=category,
        price=price,
        custom_size=CustomSize(chest=chest, waist=waist, hips=hips),
    )


def make_order(order_id, items, *, days_ago):
    return Order(
        order_id=order_id,
        order_date=NOW - timedelta(days=days_ago),
        total_amount=sum(i.price for i in items),
        items=items,
    )


def make_customer(customer_id, name, email, orders, *, status=CustomerStatus.ACTIVE, created_days_ago=400):
    return Customer.with_orders(
        id=customer_id,
        name=name,
        email=email,
        status=status,
        created_at=NOW - timedelta(days=created_days_ago),
        orders=orders,
    )


def build_customers():
    """Twelve customers.

    cust-1 owns order-1 (item-1 @ 250, item-2 @ 400) → revenue 650.
    cust-2..cust-11 own one order each with revenue n * 100.
    cust-12 has no orders (revenue 0, last order date None).
    """
    customers = [
        make_customer(
            "cust-1",
            "Alice Hartley",
            "alice@example.com",
            [make_order("order-1", [make_item("item-1", 250.0), make_item("item-2", 400.0,
                        name="Tailored Cotton Shirt", category="Shirts")], days_ago=1)],
            status=STATUS_CYCLE[1 % 3],
            created_days_ago=401,
        )
    ]
    for n in range(2, 12):
        customers.append(
            make_customer(
                f"cust-{n}",
                f"Customer {n:02d}",
                f"customer{n}@tailor.io",
                [make_order(f"order-{n}", [make_item(f"item-{n}", n * 100.0)], days_ago=n)],
                status=STATUS_CYCLE[n % 3],
                created_days_ago=400 + n,
            )
        )
    customers.append(
        make_customer(
            "cust-12",
            "Bob Alicesson",
            "bob@atelier.example",
            [],
            status=STATUS_CYCLE[12 % 3],
            created_days_ago=412,
        )
    )
    return customers


@pytest.fixture
def customers():
    return build_customers()


@pytest.fixture
def store(customers):
    return CustomerStore(customers, allow_fallback_creation=True)


@pytest.fixture
def strict_store(customers):
    return CustomerStore(customers, allow_fallback_creation=False)


@pytest.fixture
def client(store):
    with TestClient(create_app(store=store)) as test_client:
        yield test_client


@pytest.fixture
def strict_client(strict_store):
    with TestClient(create_app(store=strict_store)) as test_client:
        yield test_client
