"""Orders API package.

- order_routes: Order CRUD plus the next-identifier preview
- schemas: Request and response models
"""

from fastapi import APIRouter

from app.api.v1.orders.order_routes import router as order_router

router = APIRouter()
router.include_router(order_router)

__all__ = ["router"]
