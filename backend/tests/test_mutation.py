"""Unit tests for status and measurement updates."""

import pytest

from tailor_dashboard.core.exceptions import InvalidArgument, NotFound
from tailor_dashboard.models.customer import CustomerStatus
from tailor_dashboard.models.order import CustomSize
from tailor_dashboard.services.mutation import MutationService


# ── Customer status ──────────────────────

@pytest.mark.parametrize("status", ["active", "churned", "prospect"])
def test_set_customer_status(store, status):
    result = MutationService(store).set_customer_status("cust-1", status)
    assert result == status
    assert store.find_by_id("cust-1").status == CustomerStatus(status)


@pytest.mark.parametrize("status", ["ACTIVE", "deleted", "", None, 1])
def test_set_customer_status_invalid_never_mutates(store, status):
    before = store.find_by_id("cust-1").status

    with pytest.raises(InvalidArgument) as exc_info:
        MutationService(store).set_customer_status("cust-1", status)

    assert "must be one of" in exc_info.value.message.lower()
    assert store.find_by_id("cust-1").status == before


def test_set_customer_status_unknown_customer(store):
    with pytest.raises(NotFound):
        MutationService(store).set_customer_status("nope", "active")
    assert store.find_by_id("nope") is None


# ── Order item size ──────────────────────

def test_set_order_item_size_replaces_only_that_item(store):
    customer = store.find_by_id("cust-1")
    order = customer.find_order("order-1")
    sibling = order.find_item("item-2")
    sibling_size = sibling.custom_size
    total_before = order.total_amount
    revenue_before = customer.revenue

    item = MutationService(store).set_order_item_size(
        "cust-1", "order-1", "item-1", {"chest": 40, "waist": 32, "hips": 38}
    )

    assert item.custom_size == CustomSize(chest=40, waist=32, hips=38)
    assert item.price == 250.0
    assert item.item_name == "Custom Wool Suit"
    assert sibling.custom_size == sibling_size
    assert order.total_amount == total_before
    assert customer.revenue == revenue_before


@pytest.mark.parametrize(
    "size",
    [
        None,
        {"chest": 40, "waist": 32},
        {"chest": "40", "waist": 32, "hips": 38},
        {"chest": -2, "waist": 32, "hips": 38},
        {"chest": float("nan"), "waist": 32, "hips": 38},
    ],
)
def test_set_order_item_size_invalid(store, size):
    before = store.find_order_item("cust-1", "order-1", "item-1").custom_size
    with pytest.raises(InvalidArgument):
        MutationService(store).set_order_item_size("cust-1", "order-1", "item-1", size)
    assert store.find_order_item("cust-1", "order-1", "item-1").custom_size == before


@pytest.mark.parametrize(
    "customer_id,order_id,item_id",
    [("nope", "order-1", "item-1"), ("cust-1", "nope", "item-1"), ("cust-1", "order-1", "nope")],
)
def test_set_order_item_size_not_found(store, customer_id, order_id, item_id):
    with pytest.raises(NotFound):
        MutationService(store).set_order_item_size(
            customer_id, order_id, item_id, {"chest": 40, "waist": 32, "hips": 38}
        )


def test_set_order_item_size_does_not_create_fallback(store):
    with pytest.raises(NotFound):
        MutationService(store).set_order_item_size(
            "ghost", "order-1", "item-1", {"chest": 40, "waist": 32, "hips": 38}
        )
    assert store.find_by_id("ghost") is None
