BUILD = {"name": "Gaming rig", "components": {"cpu": "cpu-1", "vga": "vga-1"}, "totalPrice": 23000000}


def fields(response):
    return sorted(error["field"] for error in response.get_json()["errors"])


def test_create_and_get_build(client):
    r = client.post("/api/builds", json=BUILD)
    assert r.status_code == 200
    created = r.get_json()
    assert created["name"] == "Gaming rig"
    assert created["components"] == {"cpu": "cpu-1", "vga": "vga-1"}
    assert created["totalPrice"] == 23000000
    assert created["id"]
    assert created["createdAt"]

    r = client.get(f"/api/builds/{created['id']}")
    assert r.status_code == 200
    assert r.get_json() == created


def test_create_build_ignores_unknown_fields(client, builds):
    r = client.post("/api/builds", json=dict(BUILD, id="chosen", createdAt="yesterday"))
    assert r.status_code == 200
    assert r.get_json()["id"] != "chosen"
    assert r.get_json()["createdAt"] != "yesterday"


def test_create_build_accepts_long_name(client, builds):
    name = "Workstation " * 25
    r = client.post("/api/builds", json={"name": name, "components": {}, "totalPrice": 1})
    assert r.status_code == 200
    assert r.get_json()["name"] == name
    assert builds.get_build(r.get_json()["id"]).name == name


def test_create_build_requires_fields(client, builds):
    r = client.post("/api/builds", json={})
    assert r.status_code == 400
    assert r.get_json()["error"] == "Invalid build data"
    assert fields(r) == ["name", "totalPrice"]
    assert len(builds) == 0


def test_create_build_rejects_bad_values(client):
    r = client.post("/api/builds", json={"name": "  ", "components": {"toaster": "x", "cpu": 3}, "totalPrice": "100"})
    assert r.status_code == 400
    assert fields(r) == ["components.cpu", "components.toaster", "name", "totalPrice"]


def test_create_build_rejects_non_json(client):
    r = client.post("/api/builds", data="name=rig", content_type="text/plain")
    assert r.status_code == 400


def test_get_build_not_found(client):
    r = client.get("/api/builds/missing")
    assert r.status_code == 404
    assert r.get_json()["error"] == "Build not found"


def test_patch_build_merges_fields(client):
    created = client.post("/api/builds", json=BUILD).get_json()

    r = client.patch(f"/api/builds/{created['id']}", json={"components": {"cpu": "cpu-2"}})
    assert r.status_code == 200
    updated = r.get_json()
    assert updated["components"] == {"cpu": "cpu-2"}
    assert updated["name"] == created["name"]
    assert updated["totalPrice"] == created["totalPrice"]
    assert updated["createdAt"] == created["createdAt"]


def test_patch_build_not_found(client, builds):
    r = client.patch("/api/builds/missing", json={"name": "x"})
    assert r.status_code == 404
    assert len(builds) == 0


def test_patch_build_rejects_bad_values(client):
    created = client.post("/api/builds", json=BUILD).get_json()
    r = client.patch(f"/api/builds/{created['id']}", json={"totalPrice": -5})
    assert r.status_code == 400
    assert fields(r) == ["totalPrice"]
    assert client.get(f"/api/builds/{created['id']}").get_json()["totalPrice"] == BUILD["totalPrice"]
