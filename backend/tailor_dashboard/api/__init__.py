from fastapi import APIRouter

from .customers import router as customers_router
from .orders import router as orders_router

api_router = APIRouter()
api_router.include_router(customers_router)
api_router.include_router(orders_router)
