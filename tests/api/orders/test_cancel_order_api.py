async def place(client, headers, product):
    response = await client.post("/order", headers=headers, json={
        "items": [{"product_id": product.id, "quantity": 1}]
    })
    return response.json()["data"]["order"]["id"]


async def test_user_cancels_own_pending_order(client, customer, products, auth_headers):
    order_id = await place(client, auth_headers(customer), products["A"])

    response = await client.patch(f"/order/{order_id}/cancel", headers=auth_headers(customer))

    assert response.status_code == 200
    order = response.json()["data"]["order"]
    assert order["status"] == "CANCELLED"
    assert order["cancelled_by"] == "USER"
    assert order["cancelled_at"] is not None


async def test_user_cancel_twice(client, customer, products, auth_headers):
    order_id = await place(client, auth_headers(customer), products["A"])
    await client.patch(f"/order/{order_id}/cancel", headers=auth_headers(customer))

    response = await client.patch(f"/order/{order_id}/cancel", headers=auth_headers(customer))

    assert response.status_code == 400
    assert "already cancelled" in response.json()["detail"].lower()


async def test_user_cannot_cancel_processing_order(client, customer, admin_user, products, auth_headers):
    order_id = await place(client, auth_headers(customer), products["A"])
    await client.patch(f"/admin/orders/{order_id}/status", headers=auth_headers(admin_user),
                       json={"status": "PROCESSING"})

    response = await client.patch(f"/order/{order_id}/cancel", headers=auth_headers(customer))

    assert response.status_code == 400
    assert "cannot be cancelled at this stage" in response.json()["detail"].lower()


async def test_user_cannot_cancel_foreign_order(client, customer, other_customer, products, auth_headers):
    order_id = await place(client, auth_headers(customer), products["A"])

    response = await client.patch(f"/order/{order_id}/cancel", headers=auth_headers(other_customer))

    assert response.status_code == 404

    check = await client.get(f"/order/{order_id}", headers=auth_headers(customer))
    assert check.json()["data"]["order"]["status"] == "PENDING"
