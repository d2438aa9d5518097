from typing import Annotated
from fastapi import APIRouter, Query
from starlette import status
from utils.deps import db_dependency
from schemas.product_schemas import ProductQuery, ProductResponse
from services.product_service import ProductService


router = APIRouter(
    prefix="/products",
    tags=["products"]
)


@router.get("", status_code=status.HTTP_200_OK)
async def get_all_products(query: Annotated[ProductQuery, Query()], db: db_dependency):
    """
    Public catalogue listing with filtering, sorting and pagination.
    """
    products, pagination = ProductService.get_products(query, db)

    return {
        "status": "success",
        "results": len(products),
        "data": {"products": [ProductResponse.model_validate(product) for product in products]},
        "pagination": pagination
    }


@router.get("/{product_id}", status_code=status.HTTP_200_OK)
async def get_product(product_id: int, db: db_dependency):
    product = ProductService.get_product(product_id, db)

    return {
        "status": "success",
        "data": {"product": ProductResponse.model_validate(product)}
    }
