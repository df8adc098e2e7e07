import pytest

import server


@pytest.fixture()
def client_ctx(monkeypatch):
    """
    Flask test client with isolated backend globals.
    API key guard off and Socket.IO emits captured instead of broadcast.
    """
    emitted = []

    monkeypatch.setattr(server, "API_KEY", "", raising=False)
    monkeypatch.setattr(server.socketio, "emit", lambda event, data=None, **kw: emitted.append((event, data)))

    return {
        "client": server.app.test_client(),
        "emitted": emitted,
    }


@pytest.fixture()
def office_devices():
    return [
        {"name": "Edge FW", "deviceType": "Firewall", "ipAddress": "10.0.0.1"},
        {"name": "Core SW", "deviceType": "switch", "ipAddress": "10.0.0.2"},
        {"name": "Desk 1", "deviceType": "Workstation", "ipAddress": "10.0.0.50"},
        {"name": "Lobby AP", "deviceType": "Access Point"},
    ]
