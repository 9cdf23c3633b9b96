"""Customer table endpoints: paginated listing and status updates."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from tailor_dashboard.core.config import Settings
from tailor_dashboard.core.deps import get_mutation_service, get_query_service, get_settings
from tailor_dashboard.core.exceptions import InvalidArgument
from tailor_dashboard.schemas.customer import (
    CustomerListResponse,
    CustomerStatusUpdate,
    CustomerStatusUpdateResponse,
    CustomerSummary,
    Pagination,
)
from tailor_dashboard.services.mutation import MutationService
from tailor_dashboard.services.query import (
    CustomerQuery,
    QueryService,
    parse_sort_direction,
    parse_sort_key,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/customers", tags=["customers"])

ALLOWED_METHODS = "GET, PATCH"


@router.get("", response_model=CustomerListResponse)
async def list_customers(
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
    sort_by: str = Query("name", alias="sortBy"),
    order: str = Query("asc"),
    search: str = "",
    query_service: QueryService = Depends(get_query_service),
    settings: Settings = Depends(get_settings),
):
    """List customer summaries with search, sorting and pagination."""
    if limit is None:
        limit = settings.DEFAULT_PAGE_SIZE
    elif limit > settings.MAX_PAGE_SIZE:
        raise InvalidArgument(f"limit must not exceed {settings.MAX_PAGE_SIZE}")

    params = CustomerQuery(
        page=page,
        limit=limit,
        sort_by=parse_sort_key(sort_by),
        order=parse_sort_direction(order),
        search=search,
    )
    result = query_service.list_customers(params)

    return CustomerListResponse(
        customers=[CustomerSummary.model_validate(c) for c in result.items],
        pagination=Pagination(
            current_page=result.page,
            total_pages=result.total_pages,
            total_items=result.total_items,
            items_per_page=result.limit,
        ),
    )


@router.patch("", response_model=CustomerStatusUpdateResponse)
async def update_customer_status(
    body: CustomerStatusUpdate,
    mutation_service: MutationService = Depends(get_mutation_service),
):
    """Change a customer's status (active, churned or prospect)."""
    if not body.customer_id or not body.status:
        raise InvalidArgument("Missing customerId or status")

    new_status = mutation_service.set_customer_status(body.customer_id, body.status)

    return CustomerStatusUpdateResponse(
        customer_id=body.customer_id,
        new_status=new_status,
    )


@router.api_route(
    "",
    methods=["POST", "PUT", "DELETE", "OPTIONS", "HEAD", "TRACE"],
    include_in_schema=False,
)
async def customers_method_not_allowed():
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Method Not Allowed",
        headers={"Allow": ALLOWED_METHODS},
    )
