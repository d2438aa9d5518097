from decimal import Decimal


async def test_list_products_is_public(client, products):
    response = await client.get("/products", params={"sort_by": "price", "order": "asc"})

    assert response.status_code == 200
    body = response.json()
    assert body["results"] == 2
    assert [product["name"] for product in body["data"]["products"]] == ["Product B", "Product A"]
    assert body["pagination"]["total"] == 2
    assert body["pagination"]["has_next"] is False


async def test_list_products_filters(client, products):
    response = await client.get("/products", params={"price_gte": "4", "name": "product"})

    assert response.status_code == 200
    assert [product["id"] for product in response.json()["data"]["products"]] == [products["A"].id]


async def test_list_products_rejects_bad_query(client):
    response = await client.get("/products", params={"sort_by": "password", "page": 0})

    assert response.status_code == 422


async def test_get_product(client, products):
    response = await client.get(f"/products/{products['B'].id}")

    assert response.status_code == 200
    assert Decimal(response.json()["data"]["product"]["price"]) == Decimal("3.50")


async def test_get_missing_product(client):
    response = await client.get("/products/9999")

    assert response.status_code == 404
