# models/device.py

from dataclasses import dataclass
from collections.abc import Mapping
from typing import Any, Optional, Tuple

from controllers.errors import LoadShapeError


# ── Helpers ─────────────────────────────────────────────────────────────
def _opt_str(value) -> Optional[str]:
    """None / "" → None, anything else → str."""
    if value is None:
        return None
    text = str(value)
    return text if text else None


def _req_str(obj: Mapping[str, Any], key: str, what: str) -> str:
    text = _opt_str(obj.get(key))
    if text is None:
        raise LoadShapeError(f"{what} is missing required field '{key}'")
    return text


def _list_field(obj: Mapping[str, Any], key: str, what: str) -> list:
    raw = obj.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise LoadShapeError(f"{what}: '{key}' is not an array")
    return raw


def _require_mapping(obj, what: str) -> Mapping[str, Any]:
    if not isinstance(obj, Mapping):
        raise LoadShapeError(f"{what} is not an object")
    return obj


# ── Records ─────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class PortSpec:
    """One connector on a device."""

    label:    str
    type:     Optional[str] = None
    position: Optional[str] = None
    color:    Optional[str] = None
    script:   Optional[str] = None

    @classmethod
    def from_dict(cls, obj, what: str = "port") -> "PortSpec":
        obj = _require_mapping(obj, what)
        return cls(
            label=_req_str(obj, "label", what),
            type=_opt_str(obj.get("type")),
            position=_opt_str(obj.get("position")),
            color=_opt_str(obj.get("color")),
            script=_opt_str(obj.get("script")),
        )


@dataclass(frozen=True)
class ImageSpec:
    """One illustrative picture: file reference + caption."""

    file:  str
    label: str

    @classmethod
    def from_dict(cls, obj, what: str = "image") -> "ImageSpec":
        obj = _require_mapping(obj, what)
        return cls(
            file=_req_str(obj, "file", what),
            label=_req_str(obj, "label", what),
        )


@dataclass(frozen=True)
class DeviceRecord:
    """
    One catalog item. Immutable once loaded.

    ports and images are always tuples; a record without them simply has
    empty ones.
    """

    id:       str
    name:     str
    brand:    Optional[str] = None
    category: Optional[str] = None
    summary:  Optional[str] = None
    ports:    Tuple[PortSpec, ...]  = ()
    images:   Tuple[ImageSpec, ...] = ()

    @classmethod
    def from_dict(cls, obj, position: int = 0) -> "DeviceRecord":
        """Build a record from one decoded JSON object."""
        what = f"device #{position}"
        obj  = _require_mapping(obj, what)

        device_id = _req_str(obj, "id", what)
        what      = f"device '{device_id}'"

        ports = tuple(
            PortSpec.from_dict(raw, f"{what} port #{i}")
            for i, raw in enumerate(_list_field(obj, "ports", what))
        )
        images = tuple(
            ImageSpec.from_dict(raw, f"{what} image #{i}")
            for i, raw in enumerate(_list_field(obj, "images", what))
        )

        return cls(
            id=device_id,
            name=_req_str(obj, "name", what),
            brand=_opt_str(obj.get("brand")),
            category=_opt_str(obj.get("category")),
            summary=_opt_str(obj.get("summary")),
            ports=ports,
            images=images,
        )

    def __repr__(self):
        return f"<DeviceRecord {self.id} ({self.name})>"
