from sqlalchemy.orm import Session, selectinload
from core.exceptions import NotFound
from models.orders import Order, OrderStatus
from models.order_items import OrderItem
from schemas.order_schemas import CreateOrderRequest
from services.order_pricing_service import OrderPricingService, PricedOrder
from utils.logger import get_logger

logger = get_logger(__name__)


class OrderService:

    @staticmethod
    def create_order(user_id: int, request: CreateOrderRequest, db: Session) -> Order:
        """
        Creates an order for the caller from client supplied line items.

        Flow:
        1. Validate and price every item from the products table
        2. Persist the order header and its items in one transaction
        3. Return the stored order with items attached

        The client never supplies prices or totals.
        """
        priced_order = OrderPricingService.price_items(request.items, db)
        return OrderService.persist_order(user_id, priced_order, db)


    @staticmethod
    def persist_order(user_id: int, priced_order: PricedOrder, db: Session) -> Order:
        """
        Write one order row and one row per priced item, all or nothing.

        Any failure during the flush rolls the whole session back, including
        the order header, and is re-raised unchanged.
        """
        order = Order(
            user_id=user_id,
            total=priced_order.total,
            status=OrderStatus.PENDING,
            items=[
                OrderItem(
                    product_id=item.product_id,
                    quantity=item.quantity,
                    price=item.price
                )
                for item in priced_order.items
            ]
        )

        try:
            db.add(order)
            db.commit()
        except Exception:
            db.rollback()
            logger.error(
                "Order creation rolled back",
                extra={"user_id": user_id, "item_count": len(priced_order.items)},
                exc_info=True
            )
            raise

        db.refresh(order)
        logger.info(
            "Order created",
            extra={"order_id": order.id, "user_id": user_id, "total": str(order.total)}
        )
        return order


    @staticmethod
    def get_my_orders(user_id: int, db: Session) -> list[Order]:
        orders = (
            db.query(Order)
            .options(selectinload(Order.items))
            .filter(Order.user_id == user_id)
            .order_by(Order.created_at)
            .all()
        )

        logger.info("Orders fetched", extra={"user_id": user_id, "results": len(orders)})
        return orders


    @staticmethod
    def get_order_by_id(order_id: str, user_id: int, is_admin: bool, db: Session) -> Order:
        """
        Fetch one order with its items and owner.

        Non-admin callers only see their own orders. Someone else's order is
        reported exactly like a missing one so other users' order ids are not disclosed.
        """
        order = (
            db.query(Order)
            .options(selectinload(Order.items), selectinload(Order.user))
            .filter(Order.id == order_id)
            .one_or_none()
        )

        if order is None or (not is_admin and order.user_id != user_id):
            logger.warning(
                "Order not found",
                extra={"order_id": order_id, "user_id": user_id}
            )
            raise NotFound("Order not found")

        return order
