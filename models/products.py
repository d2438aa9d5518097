from core.database import Base
from sqlalchemy import (Column, Integer, String, Numeric, Boolean)
from sqlalchemy.orm import relationship
from .mixins import CreatedAtMixin, UpdatedAtMixin

class Product(Base, CreatedAtMixin, UpdatedAtMixin):
    """
    Catalogue entry. Admins manage it; orders copy the price in effect at
    order time into OrderItem.price.
    """
    __tablename__ = "products"

    #pk
    id = Column(Integer, primary_key=True, index=True)

    #relationships
    # Deleting a product nulls OrderItem.product_id; the price snapshot stays
    order_items = relationship("OrderItem", back_populates="product")

    name = Column(String(255), nullable=False, index=True)
    description = Column(String)
    brand = Column(String(100))
    unit = Column(String(50))
    image_url = Column(String)
    price = Column(Numeric(10, 2), nullable=False)
    discount = Column(Numeric(5, 2))
    rating = Column(Numeric(3, 2))
    availability = Column(Boolean, default=True, nullable=False)
