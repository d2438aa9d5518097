from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field
from models.orders import OrderStatus, CancelledBy


class OrderItemRequest(BaseModel):
    product_id: int
    # Positivity is a business rule checked by OrderPricingService (400, not 422)
    quantity: int


class CreateOrderRequest(BaseModel):
    items: list[OrderItemRequest] = Field(default_factory=list)


class UpdateOrderStatusRequest(BaseModel):
    status: OrderStatus


class UserSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str | None = None
    last_name: str | None = None


class OrderItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_id: int | None
    quantity: int
    price: Decimal


class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: int
    total: Decimal
    status: OrderStatus
    cancelled_at: datetime | None = None
    cancelled_by: CancelledBy | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    items: list[OrderItemResponse] = []


class OrderDetailResponse(OrderResponse):
    user: UserSummary | None = None
