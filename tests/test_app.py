from types import SimpleNamespace

import pytest

from sysprobe import collect
from sysprobe.app import VERSION, create_app, help_text

CPUINFO = """\
processor\t: 0
model name\t: Test CPU
cpu MHz\t\t: 1000.000
cache size\t: 256 KB
cpu cores\t: 1
flags\t\t: fpu
"""


@pytest.fixture
def client(tmp_path, monkeypatch):
    path = tmp_path / "cpuinfo"
    path.write_text(CPUINFO, encoding="utf-8")
    monkeypatch.setattr(collect, "CPUINFO_PATH", str(path))
    monkeypatch.setattr(collect.psutil, "cpu_percent", lambda interval, percpu: [7.5])
    app = create_app()
    app.testing = True
    return app.test_client()


def test_help_text_lists_every_route():
    text = help_text()
    assert text.startswith("<h1>help</h1>")
    for path in ("/test", "/version", "/all", "/cpu", "/memory", "/disk", "/network", "/node"):
        assert f"<h5>{path}:</h5>" in text


def test_help_text_exact_start():
    assert help_text().startswith("<h1>help</h1><h5>/test:</h5>test interface.")


def test_version_route(client):
    response = client.get("/version")
    assert response.status_code == 200
    assert response.get_json() == {"status": "normal", "version": "v1.0"}
    assert VERSION == "v1.0"


def test_help_route_is_plain_text(client):
    response = client.get("/help")
    assert response.status_code == 200
    assert response.mimetype == "text/plain"
    assert response.get_data(as_text=True) == help_text()


def test_test_route_accepts_post_only(client):
    assert client.post("/test").status_code == 200
    assert client.get("/test").status_code == 405


def test_unknown_route(client):
    assert client.get("/nothing-here").status_code == 404


def test_cpu_route(client):
    data = client.get("/cpu").get_json()
    assert len(data) == 1
    assert data[0]["modelName"] == "Test CPU"
    assert data[0]["percent"] == 7.5
    assert data[0]["cacheSize"] == 256


def test_memory_route_keys(client):
    data = client.get("/memory").get_json()
    assert set(data) == {
        "total_mb",
        "available_mb",
        "used_mb",
        "used_percent",
        "free_mb",
        "cached_mb",
    }


def test_disk_route_empty_is_null(client, monkeypatch):
    monkeypatch.setattr(collect.psutil, "disk_partitions", lambda all: [])
    response = client.get("/disk")
    assert response.status_code == 200
    assert response.get_json() is None


def test_network_route(client, monkeypatch):
    monkeypatch.setattr(
        collect.psutil, "net_if_addrs", lambda: {"dummy0": []}
    )
    assert client.get("/network").get_json() == [{"name": "dummy0", "address": []}]


def test_node_route(client, monkeypatch):
    monkeypatch.setattr(collect.socket, "gethostname", lambda: "probe-host")
    data = client.get("/node").get_json()
    assert data["hostname"] == "probe-host"


def test_all_route(client, monkeypatch):
    monkeypatch.setattr(collect.psutil, "disk_partitions", lambda all: [])
    monkeypatch.setattr(
        collect.psutil,
        "virtual_memory",
        lambda: SimpleNamespace(total=0, available=0, used=0, percent=0.0, free=0, cached=0),
    )
    data = client.get("/all").get_json()
    assert set(data) == {"node info", "cpu info", "mem info", "disk info", "network info"}
    assert data["disk info"] is None
    assert data["cpu info"][0]["percent"] == 7.5
    assert data["mem info"]["total_mb"] == 0