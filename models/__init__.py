# models/__init__.py

from .device import DeviceRecord, ImageSpec, PortSpec
from .device_store import DeviceStore
from .views import (
    DetailHeader,
    DetailView,
    Figure,
    ListRow,
    ListView,
    Placeholder,
    PortEntry,
)

__all__ = [
    "DeviceRecord",
    "PortSpec",
    "ImageSpec",
    "DeviceStore",
    "ListRow",
    "ListView",
    "Placeholder",
    "DetailHeader",
    "DetailView",
    "Figure",
    "PortEntry",
]
