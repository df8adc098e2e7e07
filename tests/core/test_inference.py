from models import NetworkDevice
from topology.inference import infer_connections


def _devices(*types):
    return [NetworkDevice(name=t, device_type=t) for t in types]


def test_gateway_star():
    conns = infer_connections(_devices("Firewall", "Switch", "Workstation"), prioritize_gateways=True)

    assert len(conns) == 2
    assert all(c.source == "device-0" for c in conns)
    assert {c.target for c in conns} == {"device-1", "device-2"}
    assert all(c.connection_type == "wired" for c in conns)


def test_gateways_chained_then_others_hang_off_first_gateway():
    devices = _devices("Switch", "Router", "Server", "Firewall", "Printer")
    conns = infer_connections(devices, prioritize_gateways=True)

    pairs = [(c.source, c.target) for c in conns]
    assert pairs == [
        ("device-1", "device-3"),
        ("device-1", "device-0"),
        ("device-1", "device-2"),
        ("device-1", "device-4"),
    ]


def test_gateway_ids_follow_their_own_index():
    devices = [
        NetworkDevice(name="pc", device_type="Workstation"),
        NetworkDevice(name="fw", device_type="Firewall"),
    ]
    conns = infer_connections(devices)
    assert [(c.source, c.target) for c in conns] == [("device-1", "device-0")]


def test_path_fallback_without_gateways():
    conns = infer_connections(_devices("Workstation", "Printer"), prioritize_gateways=True)

    assert len(conns) == 1
    assert (conns[0].source, conns[0].target, conns[0].connection_type) == ("device-0", "device-1", "wired")


def test_path_when_gateways_not_prioritized():
    conns = infer_connections(_devices("Router", "Switch", "Server"), prioritize_gateways=False)
    assert [(c.source, c.target) for c in conns] == [("device-0", "device-1"), ("device-1", "device-2")]


def test_empty_and_singleton_have_no_edges():
    assert infer_connections([], True) == []
    assert infer_connections(_devices("Router"), True) == []


def test_no_dangling_edges_or_self_loops():
    devices = _devices("Router", "Workstation", "Firewall", "toaster", "Server", "Router")
    devices[4].id = "srv"
    ids = {d.id or f"device-{i}" for i, d in enumerate(devices)}

    for prioritize in (True, False):
        conns = infer_connections(devices, prioritize)
        assert len(conns) == len(devices) - 1
        for c in conns:
            assert c.source in ids and c.target in ids
            assert c.source != c.target
