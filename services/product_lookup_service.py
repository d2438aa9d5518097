from typing import Iterable
from sqlalchemy.orm import Session
from models.products import Product
from utils.logger import get_logger

logger = get_logger(__name__)


class ProductLookupService:

    @staticmethod
    def get_products_by_ids(product_ids: Iterable[int], db: Session) -> dict[int, Product]:
        """
        Fetch the authoritative product rows for a set of ids in one query.

        Duplicate ids are collapsed. Ids with no matching product are simply
        absent from the result; callers decide what a missing id means.
        """
        wanted = set(product_ids)
        if not wanted:
            return {}

        products = db.query(Product).filter(Product.id.in_(wanted)).all()

        logger.debug(
            "Fetched products for pricing",
            extra={"requested": len(wanted), "found": len(products)}
        )
        return {product.id: product for product in products}
