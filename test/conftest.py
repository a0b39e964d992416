import json

import pytest

from app import create_app
from models.device import DeviceRecord
from models.device_store import DeviceStore

SAMPLE_DEVICES = [
    {
        "id": "a1",
        "name": "Widget Pro",
        "brand": "Acme",
        "category": "Tools",
        "summary": "The reference widget.",
        "ports": [
            {"label": "USB-C", "type": "data", "color": "black"},
            {"label": "Power", "type": "DC", "position": "rear",
             "script": "Ask the caller to check the power light."},
        ],
        "images": [{"file": "img/widget.png", "label": "Widget, front"}],
    },
    {"id": "b2", "name": "Gizmo", "brand": "Beta"},
]


@pytest.fixture
def raw_devices():
    return json.loads(json.dumps(SAMPLE_DEVICES))


@pytest.fixture
def devices(raw_devices):
    return [DeviceRecord.from_dict(d, i) for i, d in enumerate(raw_devices)]


@pytest.fixture
def store(raw_devices):
    s = DeviceStore()
    s.set_all(raw_devices)
    return s


@pytest.fixture
def devices_file(tmp_path, raw_devices):
    path = tmp_path / "devices.json"
    path.write_text(json.dumps(raw_devices), encoding="utf-8")
    return path


def make_app(source):
    return create_app({
        "TESTING": True,
        "SECRET_KEY": "test",
        "DEVICES_SOURCE": str(source),
        "DEVICES_LOAD_ASYNC": False,
    })


@pytest.fixture
def app(devices_file):
    return make_app(devices_file)


@pytest.fixture
def client(app):
    return app.test_client()
