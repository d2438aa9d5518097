from dataclasses import dataclass, field
from decimal import Decimal
from typing import Sequence
from sqlalchemy.orm import Session
from core.exceptions import InvalidInput, NotFound
from schemas.order_schemas import OrderItemRequest
from services.product_lookup_service import ProductLookupService
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PricedItem:
    product_id: int
    quantity: int
    price: Decimal

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


@dataclass(frozen=True)
class PricedOrder:
    total: Decimal
    items: list[PricedItem] = field(default_factory=list)


class OrderPricingService:

    @staticmethod
    def price_items(items: Sequence[OrderItemRequest], db: Session) -> PricedOrder:
        """
        Validates line items and prices them from the products table.

        Checks, in request order, stopping at the first failure:
        1. The item list is not empty
        2. Each product exists
        3. Each quantity is greater than zero

        Prices are looked up with a single query. Nothing is written here, so
        a rejected request never reaches the persistence step.
        """
        if not items:
            logger.warning("Order rejected - no items supplied")
            raise InvalidInput("Items required and cannot be empty")

        products = ProductLookupService.get_products_by_ids(
            (item.product_id for item in items), db
        )

        priced_items = []
        for item in items:
            product = products.get(item.product_id)
            if product is None:
                logger.warning(
                    "Order rejected - product not found",
                    extra={"product_id": item.product_id}
                )
                raise NotFound(f"Product {item.product_id} not found")

            if item.quantity <= 0:
                logger.warning(
                    "Order rejected - invalid quantity",
                    extra={"product_id": item.product_id, "quantity": item.quantity}
                )
                raise InvalidInput("Quantity must be > 0")

            priced_items.append(PricedItem(
                product_id=product.id,
                quantity=item.quantity,
                price=Decimal(product.price)
            ))

        total = sum((item.line_total for item in priced_items), Decimal("0.00"))

        logger.info(
            "Order priced",
            extra={"item_count": len(priced_items), "total": str(total)}
        )
        return PricedOrder(total=total, items=priced_items)
