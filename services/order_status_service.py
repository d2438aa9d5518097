from datetime import datetime, timezone
from sqlalchemy import update
from sqlalchemy.orm import Session, selectinload
from core.exceptions import NotFound, Conflict
from models.orders import Order, OrderStatus, CancelledBy
from utils.logger import get_logger

logger = get_logger(__name__)

USER_CANCELLABLE = (OrderStatus.PENDING,)
ADMIN_CANCELLABLE = (OrderStatus.PENDING, OrderStatus.PAID, OrderStatus.PROCESSING)


class OrderStatusService:
    """
    Status transitions for existing orders.

    Every write re-checks the current status in its WHERE clause, so when
    two requests race for the same order only one of them changes it.
    """

    @staticmethod
    def _load_order(order_id: str, db: Session, refresh: bool = False) -> Order | None:
        query = db.query(Order).options(selectinload(Order.items)).filter(Order.id == order_id)
        if refresh:
            query = query.populate_existing()
        return query.one_or_none()


    @staticmethod
    def _ineligible(order_id: str, current: OrderStatus) -> Conflict:
        if current == OrderStatus.CANCELLED:
            logger.warning("Order already cancelled", extra={"order_id": order_id})
            return Conflict("Order already cancelled")

        logger.warning(
            "Order cannot be cancelled at this stage",
            extra={"order_id": order_id, "order_status": current.value}
        )
        return Conflict("Order cannot be cancelled at this stage")


    @staticmethod
    def update_status(order_id: str, new_status: OrderStatus, db: Session) -> Order:
        """
        Admin override: set any status without eligibility checks.

        Cancellation audit fields are left untouched on this path.
        """
        result = db.execute(
            update(Order)
            .where(Order.id == order_id)
            .values(status=new_status)
            .execution_options(synchronize_session=False)
        )

        if result.rowcount == 0:
            # Some drivers (MySQL) count changed rows, not matched ones
            db.rollback()
            current = OrderStatusService._load_order(order_id, db, refresh=True)
            if current is None:
                logger.warning("Status update on missing order", extra={"order_id": order_id})
                raise NotFound("Order not found")
            logger.info(
                "Order status unchanged",
                extra={"order_id": order_id, "order_status": current.status.value}
            )
            return current

        db.commit()
        logger.info(
            "Order status updated",
            extra={"order_id": order_id, "order_status": new_status.value}
        )
        return OrderStatusService._load_order(order_id, db, refresh=True)


    @staticmethod
    def apply_cancellation(order_id: str, eligible: tuple[OrderStatus, ...],
                           cancelled_by: CancelledBy, db: Session) -> Order:
        """
        Conditionally move an order to CANCELLED.

        The UPDATE only matches while the order is still in one of the
        `eligible` statuses. Zero matched rows means another request changed
        it first; the current row is re-read and reported as a Conflict.
        """
        result = db.execute(
            update(Order)
            .where(Order.id == order_id, Order.status.in_(eligible))
            .values(
                status=OrderStatus.CANCELLED,
                cancelled_at=datetime.now(timezone.utc),
                cancelled_by=cancelled_by
            )
            .execution_options(synchronize_session=False)
        )

        if result.rowcount == 0:
            db.rollback()
            current = OrderStatusService._load_order(order_id, db, refresh=True)
            if current is None:
                raise NotFound("Order not found")
            logger.warning(
                "Cancellation lost to a concurrent status change",
                extra={"order_id": order_id, "cancelled_by": cancelled_by.value}
            )
            raise OrderStatusService._ineligible(order_id, current.status)

        db.commit()
        logger.info(
            "Order cancelled",
            extra={"order_id": order_id, "cancelled_by": cancelled_by.value}
        )
        return OrderStatusService._load_order(order_id, db, refresh=True)


    @staticmethod
    def cancel_order_as_user(order_id: str, user_id: int, db: Session) -> Order:
        """
        Cancel one of the caller's own orders. Only PENDING orders qualify.
        """
        logger.info(
            "User requested order cancellation",
            extra={"order_id": order_id, "user_id": user_id}
        )
        order = OrderStatusService._load_order(order_id, db)

        if order is None or order.user_id != user_id:
            logger.warning(
                "Cancellation of unknown or foreign order",
                extra={"order_id": order_id, "user_id": user_id}
            )
            raise NotFound("Order not found")

        if order.status not in USER_CANCELLABLE:
            raise OrderStatusService._ineligible(order_id, order.status)

        return OrderStatusService.apply_cancellation(order_id, USER_CANCELLABLE, CancelledBy.USER, db)


    @staticmethod
    def cancel_order_as_admin(order_id: str, db: Session) -> Order:
        """
        Cancel any order that has not shipped yet (PENDING, PAID or PROCESSING).
        """
        order = OrderStatusService._load_order(order_id, db)

        if order is None:
            logger.warning("Admin cancellation of missing order", extra={"order_id": order_id})
            raise NotFound("Order not found")

        if order.status not in ADMIN_CANCELLABLE:
            raise OrderStatusService._ineligible(order_id, order.status)

        return OrderStatusService.apply_cancellation(order_id, ADMIN_CANCELLABLE, CancelledBy.ADMIN, db)
