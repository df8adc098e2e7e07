def test_status_endpoint_returns_expected_shape(client_ctx):
    client = client_ctx["client"]

    response = client.get("/api/status")
    assert response.status_code == 200

    payload = response.get_json()
    assert payload["service"] == "nettopo"
    assert payload["api_key_enabled"] is False
    assert len(payload["categories"]) == 8
    assert "accessPoint" in payload["categories"]
    assert payload["connection_types"] == ["wired", "wireless", "vpn", "unknown"]
    assert payload["layout"]["horizontal_spacing"] == 200
    assert payload["layout"]["vertical_spacing"] == 150


def test_status_is_readable_without_api_key(client_ctx, monkeypatch):
    import server
    monkeypatch.setattr(server, "API_KEY", "secret")

    response = client_ctx["client"].get("/api/status")
    assert response.status_code == 200
    assert response.get_json()["api_key_enabled"] is True
