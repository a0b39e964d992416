# controllers/detail_renderer.py

from typing import Optional
from urllib.parse import urlsplit

from controllers.list_renderer import device_meta
from models.device import DeviceRecord, ImageSpec, PortSpec
from models.views import (
    NO_IMAGES,
    NO_PORTS,
    DetailHeader,
    DetailView,
    Figure,
    Placeholder,
    PortEntry,
)
from utils.formatting import join_present

NO_IMAGES_MESSAGE = "Images for this device are coming soon."
NO_PORTS_MESSAGE  = "No port data available yet."

_SAFE_SCHEMES = {"", "http", "https"}


# ── Images ──────────────────────────────────────────────────────────────
def image_src(file: str) -> Optional[str]:
    """
    Relative paths and http(s) URLs pass through; anything else
    (javascript:, data:, ...) yields None and the picture is not shown.
    """
    try:
        scheme = urlsplit(file.strip()).scheme.lower()
    except ValueError:
        return None
    return file if scheme in _SAFE_SCHEMES else None


def render_figure(image: ImageSpec) -> Figure:
    return Figure(src=image_src(image.file), caption=image.label)


# ── Ports ───────────────────────────────────────────────────────────────
def port_meta(port: PortSpec) -> str:
    """type · position · usually <color>, skipping what is missing."""
    color = f"usually {port.color}" if port.color else None
    return join_present(port.type, port.position, color)


def render_port(port: PortSpec) -> PortEntry:
    return PortEntry(label=port.label, meta=port_meta(port), script=port.script)


# ── Detail ──────────────────────────────────────────────────────────────
def render_detail(device: DeviceRecord) -> DetailView:
    """
    Project one resolved device into its detail view.

    Callers resolve the active id first; there is no detail for an unknown
    device.
    """
    header = DetailHeader(
        name=device.name,
        meta=device_meta(device),
        summary=device.summary or None,
    )

    images = tuple(render_figure(img) for img in device.images or ())
    if not images:
        images = (Placeholder(NO_IMAGES, NO_IMAGES_MESSAGE),)

    ports = tuple(render_port(p) for p in device.ports or ())
    if not ports:
        ports = (Placeholder(NO_PORTS, NO_PORTS_MESSAGE),)

    return DetailView(device_id=device.id, header=header, images=images, ports=ports)
