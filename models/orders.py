import enum
import uuid
from core.database import Base
from sqlalchemy.orm import relationship
from sqlalchemy import (Column, Integer, String, ForeignKey, Numeric, Enum, DateTime)
from .mixins import CreatedAtMixin, UpdatedAtMixin


class OrderStatus(str, enum.Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class CancelledBy(str, enum.Enum):
    USER = "USER"
    ADMIN = "ADMIN"


def generate_order_id() -> str:
    return str(uuid.uuid4())


class Order(Base, CreatedAtMixin, UpdatedAtMixin):
    __tablename__ = "orders"

    #pk
    id = Column(String(36), primary_key=True, default=generate_order_id)

    #fk
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    #relationships
    user = relationship("User", back_populates="orders")
    items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan",
                         order_by="OrderItem.id")

    total = Column(Numeric(10, 2), nullable=False)
    status = Column(Enum(OrderStatus, name="order_status"), default=OrderStatus.PENDING, nullable=False)
    # Only stamped by the cancel operations
    cancelled_at = Column(DateTime(timezone=True), nullable=True)
    cancelled_by = Column(Enum(CancelledBy, name="cancelled_by"), nullable=True)
