from fastapi import APIRouter, Request
from starlette import status
from utils.deps import user_dependency, db_dependency, is_admin
from schemas.order_schemas import CreateOrderRequest, OrderResponse, OrderDetailResponse
from services.order_service import OrderService
from services.order_status_service import OrderStatusService
from middleware.rate_limiter import limiter
from utils.logger import get_logger

# Setup logger
logger = get_logger(__name__)


router = APIRouter(
    prefix="/order",
    tags=["orders"]
)


@router.post("", status_code=status.HTTP_201_CREATED)
@limiter.limit("10/minute")
async def create_order(request: Request, body: CreateOrderRequest, user: user_dependency, db: db_dependency):
    """
    Place an order. Prices and total are computed server side.
    """
    order = OrderService.create_order(user.get("user_id"), body, db)

    return {
        "status": "success",
        "message": "Order created successfully",
        "data": {"order": OrderResponse.model_validate(order)}
    }


@router.get("", status_code=status.HTTP_200_OK)
async def get_my_orders(user: user_dependency, db: db_dependency):
    orders = OrderService.get_my_orders(user.get("user_id"), db)

    return {
        "status": "success",
        "results": len(orders),
        "data": {"orders": [OrderResponse.model_validate(order) for order in orders]}
    }


@router.get("/{order_id}", status_code=status.HTTP_200_OK)
async def get_order(order_id: str, user: user_dependency, db: db_dependency):
    order = OrderService.get_order_by_id(order_id, user.get("user_id"), is_admin(user), db)

    return {
        "status": "success",
        "data": {"order": OrderDetailResponse.model_validate(order)}
    }


@router.patch("/{order_id}/cancel", status_code=status.HTTP_200_OK)
@limiter.limit("5/minute")
async def cancel_order(request: Request, order_id: str, user: user_dependency, db: db_dependency):
    """
    Cancel one of your own orders while it is still pending.
    """
    order = OrderStatusService.cancel_order_as_user(order_id, user.get("user_id"), db)

    return {
        "status": "success",
        "message": "Order cancelled successfully",
        "data": {"order": OrderResponse.model_validate(order)}
    }
