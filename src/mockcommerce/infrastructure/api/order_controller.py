"""
Order Controller
================

FastAPI controller for the order lifecycle.  Role gates are route
dependencies; ownership is checked here against the loaded order because
only the API layer knows who is calling.
"""
import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from mockcommerce.application.dto import CreateOrderDTO, OrderDTO, UpdateOrderDTO
from mockcommerce.application.order_manager import OrderManager
from mockcommerce.domain.model.identifiers import is_nil
from mockcommerce.infrastructure.api.auth import (
    ADMIN,
    SELLER,
    CurrentUser,
    ensure_owner,
    get_current_user,
    get_settings,
    require_roles,
)
from mockcommerce.infrastructure.api.responses import ApiError, envelope
from mockcommerce.infrastructure.api.schemas import (
    CreateOrderRequest,
    OrderResponse,
    UpdateOrderStatusRequest,
)
from mockcommerce.infrastructure.config import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/order", tags=["orders"])


def get_order_manager(request: Request) -> OrderManager:
    return request.app.state.order_manager


def _wire(dto: OrderDTO) -> dict:
    return OrderResponse.from_dto(dto).to_wire()


def _reject_nil(value: UUID, message: str, code: str) -> None:
    if is_nil(value):
        raise ApiError(status.HTTP_400_BAD_REQUEST, message, code)


@router.get("", summary="List all orders (Admin only)")
def get_all_orders(
    user: CurrentUser = Depends(require_roles(ADMIN)),
    manager: OrderManager = Depends(get_order_manager),
):
    orders = manager.get_all_orders()
    return envelope([_wire(o) for o in orders])


@router.get("/seller/{seller_id}", summary="List a seller's orders")
def get_orders_by_seller_id(
    seller_id: UUID,
    user: CurrentUser = Depends(require_roles(SELLER)),
    manager: OrderManager = Depends(get_order_manager),
    settings: Settings = Depends(get_settings),
):
    _reject_nil(seller_id, "Invalid seller ID", "INVALID_SELLER_ID")
    ensure_owner(user, settings, seller_id)

    orders = manager.get_orders_by_seller_id(seller_id)
    return envelope([_wire(o) for o in orders])


@router.get("/seller/order/{order_id}", summary="Get one of the seller's orders")
def get_order_by_id_for_seller(
    order_id: UUID,
    user: CurrentUser = Depends(require_roles(SELLER)),
    manager: OrderManager = Depends(get_order_manager),
    settings: Settings = Depends(get_settings),
):
    _reject_nil(order_id, "Invalid order ID", "INVALID_ORDER_ID")

    order = manager.get_order_by_id(order_id)
    if order.seller_id is None:
        raise ApiError(status.HTTP_404_NOT_FOUND, "Order not found", "ORDER_NOT_FOUND")
    ensure_owner(user, settings, order.seller_id)

    return envelope(_wire(order))


@router.get("/customer/{customer_id}", summary="List a customer's orders")
def get_orders_by_customer_id(
    customer_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    manager: OrderManager = Depends(get_order_manager),
    settings: Settings = Depends(get_settings),
):
    _reject_nil(customer_id, "Invalid customer ID", "INVALID_CUSTOMER_ID")
    ensure_owner(user, settings, customer_id)

    orders = manager.get_orders_by_customer_id(customer_id)
    return envelope([_wire(o) for o in orders])


@router.get("/{order_id}", summary="Get an order by ID")
def get_order_by_id(
    order_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    manager: OrderManager = Depends(get_order_manager),
    settings: Settings = Depends(get_settings),
):
    _reject_nil(order_id, "Invalid order ID", "INVALID_ORDER_ID")

    order = manager.get_order_by_id(order_id)
    ensure_owner(user, settings, order.customer_id, order.seller_id)

    return envelope(_wire(order))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create an order")
def create_order(
    body: CreateOrderRequest,
    request: Request,
    user: CurrentUser = Depends(get_current_user),
    manager: OrderManager = Depends(get_order_manager),
    settings: Settings = Depends(get_settings),
):
    ensure_owner(user, settings, body.customer_id)

    order = manager.create_order(
        CreateOrderDTO(product_id=body.product_id, customer_id=body.customer_id)
    )
    response = envelope(_wire(order), status_code=status.HTTP_201_CREATED)
    response.headers["Location"] = str(
        request.url_for("get_order_by_id", order_id=str(order.id))
    )
    return response


@router.delete("/{order_id}", summary="Delete an order")
def delete_order(
    order_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    manager: OrderManager = Depends(get_order_manager),
    settings: Settings = Depends(get_settings),
):
    _reject_nil(order_id, "Invalid order ID", "INVALID_ORDER_ID")

    if settings.enforce_ownership and not user.is_admin:
        order = manager.get_order_by_id(order_id)
        ensure_owner(user, settings, order.customer_id, order.seller_id)

    manager.delete_order(order_id)
    return envelope(message="Order deleted successfully")


@router.put("/{order_id}/status", summary="Update an order's status (Admin or Seller)")
def update_order_status(
    order_id: UUID,
    body: UpdateOrderStatusRequest,
    user: CurrentUser = Depends(require_roles(ADMIN, SELLER)),
    manager: OrderManager = Depends(get_order_manager),
    settings: Settings = Depends(get_settings),
):
    _reject_nil(order_id, "Invalid order ID", "INVALID_ORDER_ID")
    if body.id != order_id:
        raise ApiError(status.HTTP_400_BAD_REQUEST, "ID mismatch", "ID_MISMATCH")

    if settings.enforce_ownership and not user.is_admin:
        current = manager.get_order_by_id(order_id)
        ensure_owner(user, settings, current.seller_id)

    order = manager.update_order_status(UpdateOrderDTO(id=body.id, status=body.status))
    return envelope(_wire(order))
