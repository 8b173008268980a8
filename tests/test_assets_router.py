from decimal import Decimal


def _create(client, actor="alice", **body):
    body.setdefault("name", "Laptop")
    body.setdefault("reference", "PC-001")
    body.setdefault("category", "IT")
    body.setdefault("status", "IN_SERVICE")
    response = client.post("/assets", json=body, headers={"X-User": actor})
    assert response.status_code == 200, response.text
    return response.json()["data"]


def _create_service(client, name="Finance"):
    response = client.post("/services", json={"name": name, "code": name[:3].upper()})
    assert response.status_code == 200, response.text
    return response.json()["data"]


def test_create_and_get_keeps_exact_value(client):
    created = _create(client, value="1000.00")

    response = client.get(f"/assets/{created['id']}")

    body = response.json()
    assert response.status_code == 200
    assert body["success"] is True
    assert body["timestamp"]
    assert body["data"]["value"] == "1000.00"
    assert Decimal(body["data"]["value"]) == Decimal("1000.00")
    assert body["data"]["status"] == "IN_SERVICE"
    assert body["data"]["createdBy"] == "alice"


def test_missing_asset_is_404_envelope(client):
    response = client.get("/assets/999")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["data"] is None
    assert body["message"] == "Asset not found"


def test_actor_falls_back_to_default(client):
    response = client.post("/assets", json={"name": "Desk"})

    assert response.json()["data"]["createdBy"] == "system"


def test_negative_value_is_rejected(client):
    response = client.post("/assets", json={"name": "Desk", "value": -1})

    assert response.status_code == 422
    assert response.json()["success"] is False


def test_unknown_status_in_create_is_rejected(client):
    response = client.post("/assets", json={"name": "Desk", "status": "LOST"})

    assert response.status_code == 422


def test_update_merges_fields(client):
    created = _create(client, description="15 inch", location="Room 1")

    response = client.put(f"/assets/{created['id']}", json={"value": "12.30"},
                          headers={"X-User": "bob"})

    data = response.json()["data"]
    assert data["value"] == "12.30"
    assert data["description"] == "15 inch"
    assert data["location"] == "Room 1"
    assert data["modifiedBy"] == "bob"


def test_update_missing_asset_is_404(client):
    response = client.put("/assets/999", json={"name": "x"})

    assert response.status_code == 404


def test_list_filters(client):
    service = _create_service(client)
    _create(client, name="Laptop Dell", reference="PC-1", serviceId=service["id"])
    _create(client, name="Laptop HP", reference="PC-2", status="BROKEN")
    _create(client, name="Printer", reference="PRN-1", serviceId=service["id"])

    by_service = client.get("/assets", params={"serviceId": service["id"]}).json()["data"]
    broken = client.get("/assets", params={"status": "broken"}).json()["data"]
    combined = client.get("/assets", params={"serviceId": service["id"], "search": "laptop"}).json()["data"]

    assert {a["name"] for a in by_service} == {"Laptop Dell", "Printer"}
    assert all(a["serviceName"] == "Finance" for a in by_service)
    assert [a["name"] for a in broken] == ["Laptop HP"]
    assert [a["name"] for a in combined] == ["Laptop Dell"]


def test_non_numeric_service_filter_is_client_error(client):
    response = client.get("/assets", params={"serviceId": "abc"})

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_paginated_envelope(client):
    for i in range(5):
        _create(client, name=f"Asset {i}", reference=f"R-{i}")

    response = client.get("/assets/paginated", params={"page": 1, "size": 2, "sort": "name", "direction": "desc"})

    page = response.json()["data"]
    assert [a["name"] for a in page["content"]] == ["Asset 2", "Asset 1"]
    assert page["totalElements"] == 5
    assert page["totalPages"] == 3
    assert page["size"] == 2
    assert page["number"] == 1
    assert page["first"] is False
    assert page["last"] is False
    assert page["empty"] is False


def test_paginated_last_and_empty_pages(client):
    _create(client)

    last = client.get("/assets/paginated", params={"page": 0, "size": 10}).json()["data"]
    beyond = client.get("/assets/paginated", params={"page": 3, "size": 10}).json()["data"]

    assert last["first"] is True and last["last"] is True
    assert beyond["empty"] is True
    assert beyond["content"] == []


def test_paginated_with_service_id_still_applies_status(client):
    service = _create_service(client)
    _create(client, name="A", serviceId=service["id"])
    _create(client, name="B", serviceId=service["id"], status="BROKEN")

    page = client.get("/assets/paginated", params={"serviceId": service["id"], "status": "BROKEN"}).json()["data"]

    assert [a["name"] for a in page["content"]] == ["B"]
    assert page["totalElements"] == 1


def test_bulk_status_scenario(client):
    asset = _create(client, value="1000.00")

    response = client.patch("/assets/bulk/status",
                            json={"assetIds": [asset["id"], 999999], "status": "BROKEN"},
                            headers={"X-User": "alice"})

    updated = response.json()["data"]
    assert [a["id"] for a in updated] == [asset["id"]]
    assert updated[0]["status"] == "BROKEN"

    history = client.get(f"/assets/{asset['id']}/history").json()["data"]
    assert [h["action"] for h in history] == ["STATUS_CHANGED", "CREATED"]
    assert history[0]["performedBy"] == "alice"
    assert client.get("/assets/999999/history").json()["data"] == []


def test_bulk_status_with_invalid_status_is_400(client):
    asset = _create(client)

    response = client.patch("/assets/bulk/status", json={"assetIds": [asset["id"]], "status": "FIXED"})

    assert response.status_code == 400
    assert client.get(f"/assets/{asset['id']}").json()["data"]["status"] == "IN_SERVICE"
    assert len(client.get(f"/assets/{asset['id']}/history").json()["data"]) == 1


def test_delete_and_bulk_delete(client):
    a = _create(client, name="A")
    b = _create(client, name="B")
    c = _create(client, name="C")

    single = client.delete(f"/assets/{a['id']}")
    again = client.delete(f"/assets/{a['id']}")
    bulk = client.request("DELETE", "/assets", json={"assetIds": [b["id"], c["id"], 4242]})

    assert single.status_code == again.status_code == bulk.status_code == 200
    assert bulk.json()["success"] is True
    assert client.get("/assets").json()["data"] == []
    for asset in (a, b, c):
        history = client.get(f"/assets/{asset['id']}/history").json()["data"]
        assert [h["action"] for h in history] == ["DELETED", "CREATED"]


def test_stats(client):
    _create(client, name="A", value="10.05")
    _create(client, name="B", status="BROKEN")

    stats = client.get("/assets/stats").json()["data"]

    assert stats["totalAssets"] == 2
    assert stats["activeAssets"] == 1
    assert stats["brokenAssets"] == 1
    assert stats["countsByStatus"] == {
        "IN_SERVICE": 1, "BROKEN": 1, "IN_MAINTENANCE": 0, "OUT_OF_SERVICE": 0}
    assert Decimal(stats["totalValue"]) == Decimal("10.05")


def test_search_and_by_service(client):
    service = _create_service(client, "Topography")
    _create(client, name="Total station", reference="TOPO-9", serviceId=service["id"])
    _create(client, name="Laptop", reference="PC-1")

    found = client.get("/assets/search", params={"q": "topo"}).json()["data"]
    owned = client.get(f"/assets/service/{service['id']}").json()["data"]

    assert [a["name"] for a in found] == ["Total station"]
    assert [a["name"] for a in owned] == ["Total station"]


def test_export_all_is_attachment(client):
    _create(client, name="A", description="x, y")
    _create(client, name="B, C")
    _create(client, name="D")

    response = client.post("/assets/export")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "attachment" in response.headers["content-disposition"]
    lines = response.text.splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("id,name,reference")
    assert [line.split(",")[1] for line in lines[1:]] == ["A", "B  C", "D"]


def test_export_selected_ids(client):
    a = _create(client, name="A")
    _create(client, name="B")

    response = client.post("/assets/export", json={"assets": [a["id"]]})

    lines = response.text.splitlines()
    assert len(lines) == 2
    assert lines[1].split(",")[1] == "A"


def test_deleting_service_leaves_asset_orphaned(client):
    service = _create_service(client)
    asset = _create(client, serviceId=service["id"])

    client.delete(f"/services/{service['id']}")
    data = client.get(f"/assets/{asset['id']}").json()["data"]

    assert data["serviceId"] == service["id"]
    assert data["serviceName"] is None

    replacement = _create_service(client, name="HR")
    data = client.get(f"/assets/{asset['id']}").json()["data"]

    assert replacement["id"] != service["id"]
    assert data["serviceName"] is None
    assert client.get(f"/assets/service/{replacement['id']}").json()["data"] == []
