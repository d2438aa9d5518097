from fastapi import APIRouter
from starlette import status
from utils.deps import admin_dependency, db_dependency
from schemas.order_schemas import UpdateOrderStatusRequest, OrderResponse
from services.order_status_service import OrderStatusService
from utils.logger import get_logger

logger = get_logger(__name__)


router = APIRouter(
    prefix="/admin/orders",
    tags=["admin"]
)


@router.patch("/{order_id}/status", status_code=status.HTTP_200_OK)
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest, admin: admin_dependency, db: db_dependency):
    """
    Set an order's status directly (admin override, no transition checks).
    """
    order = OrderStatusService.update_status(order_id, body.status, db)

    logger.info(
        "Admin changed order status",
        extra={"order_id": order_id, "admin_id": admin.get("user_id"), "order_status": body.status.value}
    )

    return {
        "status": "success",
        "message": "Order status updated successfully",
        "data": {"order": OrderResponse.model_validate(order)}
    }


@router.patch("/{order_id}/cancel", status_code=status.HTTP_200_OK)
async def cancel_order(order_id: str, admin: admin_dependency, db: db_dependency):
    order = OrderStatusService.cancel_order_as_admin(order_id, db)

    logger.info(
        "Admin cancelled order",
        extra={"order_id": order_id, "admin_id": admin.get("user_id")}
    )

    return {
        "status": "success",
        "message": "Order cancelled successfully",
        "data": {"order": OrderResponse.model_validate(order)}
    }
