from decimal import Decimal
import pytest
from core.exceptions import NotFound
from schemas.order_schemas import CreateOrderRequest, OrderItemRequest
from services.order_service import OrderService


def place_order(session, user, product, quantity=1):
    request = CreateOrderRequest(items=[OrderItemRequest(product_id=product.id, quantity=quantity)])
    return OrderService.create_order(user.id, request, session)


def test_get_my_orders_only_returns_own_orders(session, customer, other_customer, products):
    mine = [place_order(session, customer, products["A"]), place_order(session, customer, products["B"], 2)]
    place_order(session, other_customer, products["A"])

    orders = OrderService.get_my_orders(customer.id, session)

    assert {order.id for order in orders} == {order.id for order in mine}
    assert all(len(order.items) == 1 for order in orders)


def test_get_my_orders_empty(session, customer):
    assert OrderService.get_my_orders(customer.id, session) == []


def test_owner_can_fetch_order_with_user(session, customer, products):
    placed = place_order(session, customer, products["B"], 4)

    order = OrderService.get_order_by_id(placed.id, customer.id, False, session)

    assert order.id == placed.id
    assert order.total == Decimal("14.00")
    assert order.items[0].quantity == 4
    assert order.user.email == customer.email


def test_missing_order_not_found(session, customer):
    with pytest.raises(NotFound) as exc_info:
        OrderService.get_order_by_id("does-not-exist", customer.id, False, session)

    assert exc_info.value.detail == "Order not found"


def test_foreign_order_looks_missing(session, customer, other_customer, products):
    placed = place_order(session, customer, products["A"])

    with pytest.raises(NotFound) as exc_info:
        OrderService.get_order_by_id(placed.id, other_customer.id, False, session)

    assert exc_info.value.detail == "Order not found"


def test_admin_can_fetch_any_order(session, customer, admin_user, products):
    placed = place_order(session, customer, products["A"])

    order = OrderService.get_order_by_id(placed.id, admin_user.id, True, session)

    assert order.user_id == customer.id
    assert order.user.id == customer.id
