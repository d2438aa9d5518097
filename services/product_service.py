import math
from sqlalchemy.orm import Session
from core.exceptions import NotFound
from models.products import Product
from schemas.product_schemas import CreateProductRequest, UpdateProductRequest, ProductQuery
from utils.logger import get_logger

logger = get_logger(__name__)


class ProductService:

    @staticmethod
    def create_product(request: CreateProductRequest, db: Session) -> Product:
        model = Product(**request.model_dump())

        db.add(model)
        db.commit()
        db.refresh(model)

        logger.info("Product created", extra={"product_id": model.id})
        return model


    @staticmethod
    def get_products(query: ProductQuery, db: Session) -> tuple[list[Product], dict]:
        """
        List products matching the query, one page at a time.

        Text filters are case-insensitive substring matches; the price,
        rating and discount filters are inclusive bounds.

        Returns:
            (products on the requested page, pagination metadata)
        """
        filters = []
        if query.name:
            filters.append(Product.name.ilike(f"%{query.name}%"))
        if query.brand:
            filters.append(Product.brand.ilike(f"%{query.brand}%"))
        if query.availability is not None:
            filters.append(Product.availability == query.availability)
        if query.price_gte is not None:
            filters.append(Product.price >= query.price_gte)
        if query.price_lte is not None:
            filters.append(Product.price <= query.price_lte)
        if query.rating_gte is not None:
            filters.append(Product.rating >= query.rating_gte)
        if query.discount_gte is not None:
            filters.append(Product.discount >= query.discount_gte)

        base = db.query(Product).filter(*filters)
        total = base.count()

        sort_column = getattr(Product, query.sort_by)
        ordering = sort_column.asc() if query.order == "asc" else sort_column.desc()

        products = (
            base.order_by(ordering, Product.id)
            .offset((query.page - 1) * query.limit)
            .limit(query.limit)
            .all()
        )

        total_pages = math.ceil(total / query.limit)
        pagination = {
            "page": query.page,
            "limit": query.limit,
            "total": total,
            "total_pages": total_pages,
            "has_next": query.page < total_pages,
            "has_prev": query.page > 1
        }

        logger.info("Products fetched", extra={"results": len(products), "total_matches": total})
        return products, pagination


    @staticmethod
    def get_product(product_id: int, db: Session) -> Product:
        model = db.query(Product).filter(Product.id == product_id).one_or_none()

        if model is None:
            logger.warning("Product not found", extra={"product_id": product_id})
            raise NotFound(f"Product {product_id} not found")

        return model


    @staticmethod
    def update_product(product_id: int, request: UpdateProductRequest, db: Session) -> Product:
        """
        Apply a partial update. Price changes only affect orders placed
        afterwards; existing order items keep their snapshot.
        """
        model = ProductService.get_product(product_id, db)

        changes = request.model_dump(exclude_unset=True)
        for field, value in changes.items():
            setattr(model, field, value)

        db.commit()
        db.refresh(model)

        logger.info(
            "Product updated",
            extra={"product_id": product_id, "fields": sorted(changes)}
        )
        return model


    @staticmethod
    def delete_product(product_id: int, db: Session):
        model = ProductService.get_product(product_id, db)

        db.delete(model)
        db.commit()

        logger.info("Product deleted", extra={"product_id": product_id})
