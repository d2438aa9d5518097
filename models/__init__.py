from models.users import User, Role
from models.orders import Order, OrderStatus, CancelledBy
from models.order_items import OrderItem
from models.products import Product

__all__ = ["User", "Role", "Order", "OrderStatus", "CancelledBy", "OrderItem", "Product"]
