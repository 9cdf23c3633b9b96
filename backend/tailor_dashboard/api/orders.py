"""Per-customer order history and measurement edits."""

from fastapi import APIRouter, Depends, HTTPException, status

from tailor_dashboard.core.deps import get_mutation_service, get_query_service
from tailor_dashboard.core.exceptions import InvalidArgument
from tailor_dashboard.schemas.order import (
    OrderItemResponse,
    OrderItemSizeUpdate,
    OrderItemSizeUpdateResponse,
    OrderListResponse,
    OrderResponse,
)
from tailor_dashboard.services.mutation import MutationService
from tailor_dashboard.services.query import QueryService

router = APIRouter(prefix="/customers/{customer_id}/orders", tags=["orders"])

ALLOWED_METHODS = "GET, PATCH"


@router.get("", response_model=OrderListResponse)
async def list_customer_orders(
    customer_id: str,
    query_service: QueryService = Depends(get_query_service),
):
    """Full order graph of one customer, items and measurements included."""
    orders = query_service.get_orders(customer_id)
    return OrderListResponse(orders=[OrderResponse.model_validate(o) for o in orders])


@router.patch("", response_model=OrderItemSizeUpdateResponse)
async def update_order_item_size(
    customer_id: str,
    body: OrderItemSizeUpdate,
    mutation_service: MutationService = Depends(get_mutation_service),
):
    """Replace the measurements of one order item."""
    if not body.order_id or not body.order_item_id or body.custom_size is None:
        raise InvalidArgument("Missing required fields: orderId, orderItemId, customSize")

    item = mutation_service.set_order_item_size(
        customer_id, body.order_id, body.order_item_id, body.custom_size
    )

    return OrderItemSizeUpdateResponse(updated_item=OrderItemResponse.model_validate(item))


@router.api_route(
    "",
    methods=["POST", "PUT", "DELETE", "OPTIONS", "HEAD", "TRACE"],
    include_in_schema=False,
)
async def orders_method_not_allowed(customer_id: str):
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Method Not Allowed",
        headers={"Allow": ALLOWED_METHODS},
    )
