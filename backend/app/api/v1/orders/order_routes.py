"""Order CRUD API endpoints."""

import structlog
from fastapi import APIRouter, HTTPException

from app.api.v1.dependencies import OrderServiceDep
from app.api.v1.orders.schemas import (
    NextOrderIdResponse,
    OrderCreateRequest,
    OrderResponse,
    OrderStatusUpdateRequest,
    OrderUpdateRequest,
    StatusResponse,
)
from app.services.companies.exceptions import CompanyNotFound
from app.services.exceptions import StorageUnavailable
from app.services.orders.exceptions import OrderNotFound

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["orders"])


@router.get("/orders", response_model=list[OrderResponse], operation_id="listOrders")
async def list_orders(service: OrderServiceDep) -> list[OrderResponse]:
    """List all orders, newest first."""
    orders = await service.list_orders()
    return [OrderResponse.from_model(order) for order in orders]


@router.get("/orders/civil", response_model=list[OrderResponse], operation_id="listCivilOrders")
async def list_civil_orders(service: OrderServiceDep) -> list[OrderResponse]:
    """List orders that do not belong to a company, newest first."""
    orders = await service.list_orders(civil_only=True)
    return [OrderResponse.from_model(order) for order in orders]


@router.get("/orders/generate/next-id", response_model=NextOrderIdResponse, operation_id="previewNextOrderId")
async def preview_next_order_id(service: OrderServiceDep) -> NextOrderIdResponse:
    """Show the identifier the next order would get.

    Read-only: the identifier is not reserved, a concurrent order may take it.
    """
    try:
        preview = await service.preview_next_identifier()
    except StorageUnavailable:
        raise HTTPException(status_code=503, detail="Order storage unavailable")
    return NextOrderIdResponse.from_preview(preview)


@router.get("/orders/{order_id}", response_model=OrderResponse, operation_id="getOrder")
async def get_order(order_id: str, service: OrderServiceDep) -> OrderResponse:
    """Get a single order by its ID."""
    try:
        order = await service.get_order(order_id)
        return OrderResponse.from_model(order)
    except OrderNotFound:
        raise HTTPException(status_code=404, detail="Order not found")


@router.post("/orders", response_model=OrderResponse, status_code=201, operation_id="createOrder")
async def create_order(body: OrderCreateRequest, service: OrderServiceDep) -> OrderResponse:
    """Create an order under the next identifier of the current month."""
    try:
        order = await service.create_order(**body.model_dump())
    except CompanyNotFound:
        raise HTTPException(status_code=404, detail="Company not found")
    except StorageUnavailable:
        logger.error("Order not created, identifier could not be issued", customer=body.name)
        raise HTTPException(status_code=503, detail="Order storage unavailable, order was not created")
    return OrderResponse.from_model(order)


@router.patch("/orders/{order_id}/status", response_model=OrderResponse, operation_id="updateOrderStatus")
async def update_order_status(
    order_id: str,
    body: OrderStatusUpdateRequest,
    service: OrderServiceDep,
) -> OrderResponse:
    """Move an order to another status."""
    try:
        order = await service.update_status(order_id, body.status)
        return OrderResponse.from_model(order)
    except OrderNotFound:
        raise HTTPException(status_code=404, detail="Order not found")


@router.put("/orders/{order_id}", response_model=OrderResponse, operation_id="updateOrder")
async def update_order(
    order_id: str,
    body: OrderUpdateRequest,
    service: OrderServiceDep,
) -> OrderResponse:
    """Update order details. The order identifier cannot be changed."""
    try:
        order = await service.update_order(order_id, body.model_dump(exclude_unset=True))
        return OrderResponse.from_model(order)
    except OrderNotFound:
        raise HTTPException(status_code=404, detail="Order not found")


@router.delete("/orders/{order_id}", response_model=StatusResponse, operation_id="deleteOrder")
async def delete_order(order_id: str, service: OrderServiceDep) -> StatusResponse:
    """Delete an order. Its identifier is not handed out again."""
    try:
        await service.delete_order(order_id)
    except OrderNotFound:
        raise HTTPException(status_code=404, detail="Order not found")
    return StatusResponse(status="deleted", message="Order deleted successfully")
