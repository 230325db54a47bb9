from conftest import product_data


def test_cpu_with_psu_end_to_end(client, catalog):
    cpu = catalog.create_product(product_data(socket="am5", wattage=105))
    psu = catalog.create_product(product_data(name="Corsair RM650e", category="psu", brand="Corsair", socket=None, wattage=None, specs={"wattage": 650}))

    r = client.post("/api/compatibility", json={"components": {"cpu": cpu.id, "psu": psu.id}})
    assert r.status_code == 200
    body = r.get_json()
    assert body["totalWattage"] == 105
    assert body["compatibility"] == {"cpuMainboard": True, "ramMainboard": True, "psuWattage": "adequate", "warnings": []}


def test_legacy_psu_draw_switch(catalog, builds, woocommerce):
    from server import create_app

    app = create_app(config={"TESTING": True, "COUNT_PSU_WATTAGE": True}, catalog=catalog, builds=builds, woocommerce=woocommerce)
    cpu = catalog.create_product(product_data(wattage=105))
    psu = catalog.create_product(product_data(category="psu", socket=None, wattage=650, specs={"wattage": 650}))

    body = app.test_client().post("/api/compatibility", json={"components": {"cpu": cpu.id, "psu": psu.id}}).get_json()
    assert body["totalWattage"] == 755
    assert body["compatibility"]["psuWattage"] == "insufficient"


def test_socket_mismatch(client, catalog):
    cpu = catalog.create_product(product_data(socket="lga1700"))
    board = catalog.create_product(product_data(category="mainboard", socket="am5"))

    body = client.post("/api/compatibility", json={"components": {"cpu": cpu.id, "mainboard": board.id}}).get_json()
    assert body["compatibility"]["cpuMainboard"] is False
    assert body["compatibility"]["warnings"]
    assert body["totalWattage"] == 210


def test_empty_selection(client):
    r = client.post("/api/compatibility", json={"components": {}})
    assert r.status_code == 200
    assert r.get_json()["totalWattage"] == 0


def test_missing_components(client):
    r = client.post("/api/compatibility", json={})
    assert r.status_code == 400
    assert r.get_json()["errors"] == [{"field": "components", "message": "Field required"}]
