import json

import pytest
import requests

from controllers.device_loader import (
    FAILED,
    LOADED,
    PENDING,
    DeviceLoader,
    start_loader,
)
from controllers.diagnostics import device_load_failed, devices_loaded
from controllers.errors import HttpStatusError, LoadShapeError, NetworkError, ParseError
from models.device_store import DeviceStore

URL = "https://catalog.example.com/data/devices.json"


class FakeResponse:
    def __init__(self, status_code=200, body=b"", reason="OK"):
        self.status_code = status_code
        self.content     = body
        self.reason      = reason


class FakeSession:
    """Stands in for requests.Session; records every call."""

    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc      = exc
        self.calls    = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if self.exc:
            raise self.exc
        return self.response


def _http_loader(store, **kw):
    return DeviceLoader(store, URL, session=FakeSession(**kw))


def test_http_load_commits_devices(raw_devices):
    store  = DeviceStore()
    loader = _http_loader(store, response=FakeResponse(body=json.dumps(raw_devices).encode()))

    result = loader.load()

    assert result.ok and result.error is None
    assert result.count == 2
    assert [d.id for d in store.all()] == ["a1", "b2"]
    assert loader.status == LOADED


def test_http_load_bypasses_cache(raw_devices):
    session = FakeSession(response=FakeResponse(body=json.dumps(raw_devices).encode()))
    DeviceLoader(DeviceStore(), URL, session=session, timeout=2.5).load()

    call = session.calls[0]
    assert call["url"] == URL
    assert "no-cache" in call["headers"]["Cache-Control"]
    assert call["headers"]["Pragma"] == "no-cache"
    assert call["timeout"] == 2.5


@pytest.mark.parametrize("kw, error_type", [
    ({"exc": requests.ConnectionError("refused")}, NetworkError),
    ({"response": FakeResponse(404, b"not found", "Not Found")}, HttpStatusError),
    ({"response": FakeResponse(500, b"", "Server Error")}, HttpStatusError),
    ({"response": FakeResponse(body=b"<html>oops</html>")}, ParseError),
    ({"response": FakeResponse(body=b"{}")}, LoadShapeError),
    ({"response": FakeResponse(body=b'[{"name": "no id"}]')}, LoadShapeError),
])
def test_failures_leave_store_empty(kw, error_type):
    store  = DeviceStore()
    loader = _http_loader(store, **kw)

    result = loader.load()

    assert not result.ok
    assert isinstance(result.error, error_type)
    assert store.all() == ()
    assert not store.is_loaded
    assert loader.status == FAILED
    assert loader.last_error is result.error


def test_shape_error_message():
    result = _http_loader(DeviceStore(), response=FakeResponse(body=b"{}")).load()
    assert "not an array at the top level" in str(result.error)


def test_http_status_error_carries_status():
    result = _http_loader(DeviceStore(), response=FakeResponse(503, b"", "Unavailable")).load()
    assert result.error.status_code == 503


def test_file_source(devices_file):
    store  = DeviceStore()
    result = DeviceLoader(store, devices_file).load()
    assert result.ok
    assert len(store) == 2


def test_missing_file_is_network_error(tmp_path):
    result = DeviceLoader(DeviceStore(), tmp_path / "nope.json").load()
    assert isinstance(result.error, NetworkError)


def test_failure_signal_carries_diagnostic():
    received = []

    def on_failure(sender, diagnostic):
        received.append((sender, diagnostic))

    loader = _http_loader(DeviceStore(), response=FakeResponse(502, b"", "Bad Gateway"))
    with device_load_failed.connected_to(on_failure):
        loader.load()

    assert len(received) == 1
    sender, diag = received[0]
    assert sender is loader
    assert diag.kind == "http_status"
    assert diag.status_code == 502
    assert diag.source == URL


def test_loaded_signal(devices_file):
    counts = []

    def on_loaded(sender, count):
        counts.append(count)

    with devices_loaded.connected_to(on_loaded):
        DeviceLoader(DeviceStore(), devices_file).load()

    assert counts == [2]


def test_failure_is_logged(caplog):
    loader = _http_loader(DeviceStore(), response=FakeResponse(body=b"[1"))
    with caplog.at_level("ERROR"):
        loader.load()
    assert "Error loading devices" in caplog.text


def test_start_loader_inline_and_background(devices_file):
    store  = DeviceStore()
    loader = DeviceLoader(store, devices_file)
    assert loader.status == PENDING

    thread = start_loader(loader)
    thread.join(timeout=5)
    assert loader.status == LOADED

    result = start_loader(DeviceLoader(DeviceStore(), devices_file), background=False)
    assert result.ok


def test_deeply_nested_body_is_parse_error(tmp_path):
    path = tmp_path / "devices.json"
    path.write_bytes(b"[" * 100000 + b"]" * 100000)
    store = DeviceStore()

    result = DeviceLoader(store, path).load()

    assert not result.ok
    assert isinstance(result.error, ParseError)
    assert store.all() == ()


class ClosingSession(FakeSession):
    instances = []

    def __init__(self):
        super().__init__(response=FakeResponse(body=b"[]"))
        self.closed = False
        ClosingSession.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True


def test_default_session_is_closed_after_fetch(monkeypatch):
    ClosingSession.instances = []
    monkeypatch.setattr(requests, "Session", ClosingSession)

    result = DeviceLoader(DeviceStore(), URL).load()

    assert result.ok
    assert len(ClosingSession.instances) == 1
    session = ClosingSession.instances[0]
    assert session.closed
    assert "no-cache" in session.calls[0]["headers"]["Cache-Control"]
