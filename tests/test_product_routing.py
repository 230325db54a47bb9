from conftest import product_data


def test_list_products_with_filters(client, catalog):
    cpu = catalog.create_product(product_data(price=5000))
    catalog.create_product(product_data(name="Intel Core i9 14900K", brand="Intel", price=9000, socket="lga1700"))
    catalog.create_product(product_data(name="MSI B650", category="mainboard", brand="MSI", price=5000))

    r = client.get("/api/products?category=cpu&brand=AMD,Intel&socket=am5&minPrice=5000&maxPrice=5000&search=ryzen")
    assert r.status_code == 200
    assert r.get_json() == [cpu.to_dict()]


def test_list_products_without_filters(client, catalog):
    catalog.create_product(product_data())
    catalog.create_product(product_data(category="mainboard"))

    r = client.get("/api/products")
    assert r.status_code == 200
    assert len(r.get_json()) == 2


def test_list_products_wire_format(client, catalog):
    catalog.create_product(product_data(specs={"cores": "8"}))
    product = client.get("/api/products").get_json()[0]
    assert set(product) == {"id", "name", "category", "brand", "price", "image", "description", "specs", "socket", "wattage", "inStock"}
    assert product["inStock"] is True


def test_list_products_rejects_bad_price(client):
    r = client.get("/api/products?minPrice=cheap")
    assert r.status_code == 400
    body = r.get_json()
    assert body["status"] == "error"
    assert body["errors"][0]["field"] == "minPrice"


def test_list_products_rejects_unknown_category(client):
    r = client.get("/api/products?category=toaster")
    assert r.status_code == 400
    assert body_fields(r) == ["category"]


def test_get_product(client, catalog):
    product = catalog.create_product(product_data())
    r = client.get(f"/api/products/{product.id}")
    assert r.status_code == 200
    assert r.get_json()["name"] == product.name


def test_get_product_not_found(client):
    r = client.get("/api/products/missing")
    assert r.status_code == 404
    assert r.get_json()["error"] == "Product not found"


def test_categories_in_display_order(client):
    categories = client.get("/api/categories").get_json()
    assert len(categories) == 14
    assert categories[0] == {"id": "cpu", "name": "CPU", "order": 1}
    assert [c["order"] for c in categories] == list(range(1, 15))


def body_fields(response):
    return [error["field"] for error in response.get_json()["errors"]]
