from fastapi import APIRouter
from starlette import status
from utils.deps import admin_dependency, db_dependency
from schemas.product_schemas import CreateProductRequest, UpdateProductRequest, ProductResponse
from services.product_service import ProductService
from utils.logger import get_logger

logger = get_logger(__name__)


router = APIRouter(
    prefix="/admin/products",
    tags=["admin"]
)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(body: CreateProductRequest, admin: admin_dependency, db: db_dependency):
    product = ProductService.create_product(body, db)

    logger.info(
        "Admin created product",
        extra={"product_id": product.id, "admin_id": admin.get("user_id")}
    )

    return {
        "status": "success",
        "data": {"product": ProductResponse.model_validate(product)}
    }


@router.patch("/{product_id}", status_code=status.HTTP_200_OK)
async def update_product(product_id: int, body: UpdateProductRequest, admin: admin_dependency, db: db_dependency):
    product = ProductService.update_product(product_id, body, db)

    logger.info(
        "Admin updated product",
        extra={"product_id": product_id, "admin_id": admin.get("user_id")}
    )

    return {
        "status": "success",
        "data": {"product": ProductResponse.model_validate(product)}
    }


@router.delete("/{product_id}", status_code=status.HTTP_200_OK)
async def delete_product(product_id: int, admin: admin_dependency, db: db_dependency):
    ProductService.delete_product(product_id, db)

    logger.info(
        "Admin deleted product",
        extra={"product_id": product_id, "admin_id": admin.get("user_id")}
    )

    return {"status": "success", "data": None}
