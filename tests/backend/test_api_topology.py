import server


def test_demo_endpoint_returns_fixture(client_ctx):
    response = client_ctx["client"].get("/api/topology/demo")
    assert response.status_code == 200

    data = response.get_json()
    assert len(data["nodes"]) == 9
    assert len(data["edges"]) == 8
    assert data["metadata"]["demo"] is True
    assert data["metadata"]["source"] == "demo"


def test_create_topology_infers_gateway_star(client_ctx, office_devices):
    response = client_ctx["client"].post("/api/topology", json={"devices": office_devices})
    assert response.status_code == 200

    data = response.get_json()
    ids = [n["id"] for n in data["nodes"]]
    assert ids == ["device-0", "device-1", "device-2", "device-3"]
    assert {e["source"] for e in data["edges"]} == {"device-0"}
    assert {e["target"] for e in data["edges"]} == {"device-1", "device-2", "device-3"}
    assert all(e["category"] == "wired" for e in data["edges"])
    assert all(e["style"]["stroke"] == "#3b82f6" for e in data["edges"])

    meta = data["metadata"]
    assert meta["demo"] is False
    assert meta["gateways"] == ["device-0"]
    assert meta["categories"]["accessPoint"] == 1


def test_create_topology_nodes_carry_positions_and_roles(client_ctx, office_devices):
    data = client_ctx["client"].post("/api/topology", json={"devices": office_devices}).get_json()
    by_id = {n["id"]: n for n in data["nodes"]}

    assert by_id["device-0"]["position"] == {"x": 0.0, "y": 0.0}
    assert by_id["device-1"]["position"] == {"x": 0.0, "y": 150.0}
    assert by_id["device-3"]["position"] == {"x": 400.0, "y": 150.0}
    assert by_id["device-0"]["displayRole"] == "Security Device"
    assert by_id["device-0"]["data"]["ipAddress"] == "10.0.0.1"


def test_create_topology_accepts_bare_device_list(client_ctx, office_devices):
    response = client_ctx["client"].post("/api/topology", json=office_devices)
    assert response.status_code == 200
    assert len(response.get_json()["nodes"]) == 4


def test_empty_device_list_falls_back_to_demo(client_ctx):
    response = client_ctx["client"].post("/api/topology", json={"devices": []})
    assert response.status_code == 200

    data = response.get_json()
    assert len(data["nodes"]) == 9
    assert data["metadata"]["demo"] is True


def test_explicit_connections_are_used_and_dangling_ones_dropped(client_ctx):
    body = {
        "devices": [
            {"id": "a", "name": "A", "deviceType": "Server"},
            {"id": "b", "name": "B", "deviceType": "Server"},
        ],
        "connections": [
            {"source": "a", "target": "b", "connectionType": "vpn", "bandwidth": "100 Mbps"},
            {"source": "a", "target": "ghost"},
        ],
    }
    data = client_ctx["client"].post("/api/topology", json=body).get_json()

    assert len(data["edges"]) == 1
    edge = data["edges"][0]
    assert edge["category"] == "vpn"
    assert edge["label"] == "100 Mbps"
    assert edge["style"]["strokeDasharray"] == "10,5"


def test_create_topology_rejects_invalid_device(client_ctx):
    body = {"devices": [{"name": "x", "deviceType": 42}]}
    response = client_ctx["client"].post("/api/topology", json=body)
    assert response.status_code == 400
    assert "devices[0]" in response.get_json()["error"]


def test_create_topology_rejects_non_list_devices(client_ctx):
    response = client_ctx["client"].post("/api/topology", json={"devices": "router"})
    assert response.status_code == 400


def test_create_topology_rejects_non_json_body(client_ctx):
    response = client_ctx["client"].post("/api/topology", data="not json", content_type="text/plain")
    assert response.status_code == 400
    assert response.get_json()["error"] == "Request body must be JSON"


def test_regenerate_emits_topology_update(client_ctx, office_devices):
    response = client_ctx["client"].post("/api/topology/regenerate", json={"devices": office_devices})
    assert response.status_code == 200

    emitted = client_ctx["emitted"]
    assert len(emitted) == 1
    event, data = emitted[0]
    assert event == "topology_update"
    assert data["metadata"]["source"] == "regenerate"
    assert [n["position"] for n in data["nodes"]] == [n["position"] for n in response.get_json()["nodes"]]


def test_categories_endpoint_lists_profiles_and_styles(client_ctx):
    data = client_ctx["client"].get("/api/topology/categories").get_json()

    assert len(data["categories"]) == 8
    router = next(c for c in data["categories"] if c["category"] == "router")
    assert router["default_role"] == "Network Gateway"
    assert set(data["edge_styles"]) == {"wired", "wireless", "vpn", "unknown"}


def test_api_key_guard_rejects_missing_key(client_ctx, monkeypatch):
    monkeypatch.setattr(server, "API_KEY", "secret")
    client = client_ctx["client"]

    assert client.get("/api/topology/demo").status_code == 401
    response = client.get("/api/topology/demo", headers={"X-API-Key": "secret"})
    assert response.status_code == 200
