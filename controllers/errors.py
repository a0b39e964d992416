# controllers/errors.py

"""
Catalog error taxonomy.

Every load failure derives from DeviceLoadError so the loader can catch them
at one boundary and show a single message. SelectionMiss is handled as a
no-op by the store and never reaches the user.
"""


class CatalogError(Exception):
    """Base class for all catalog exceptions."""


class DeviceLoadError(CatalogError):
    """Raised when the device catalog could not be loaded."""

    kind = "load"


class NetworkError(DeviceLoadError):
    """The data source could not be reached (or read, for file sources)."""

    kind = "network"


class HttpStatusError(DeviceLoadError):
    """The data source answered with a non-success status."""

    kind = "http_status"

    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason      = reason or ""
        super().__init__(f"HTTP {status_code} {self.reason}".strip())


class ParseError(DeviceLoadError):
    """The body could not be decoded as JSON."""

    kind = "parse"


class LoadShapeError(DeviceLoadError):
    """Decoded data does not have the shape of a device catalog."""

    kind = "shape"


class SelectionMiss(CatalogError):
    """A selection referenced an id that is not in the store."""

    def __init__(self, device_id):
        self.device_id = device_id
        super().__init__(f"no device with id {device_id!r}")
