# controllers/diagnostics.py

"""
Loader diagnostics as blinker signals.

The loader sends, host code subscribes:

    from controllers.diagnostics import device_load_failed

    @device_load_failed.connect
    def on_failure(sender, diagnostic):
        ...

`sender` is the DeviceLoader instance.
"""

from dataclasses import dataclass
from typing import Optional

from blinker import Namespace

_signals = Namespace()

devices_loaded     = _signals.signal("devices-loaded")
device_load_failed = _signals.signal("device-load-failed")


@dataclass(frozen=True)
class LoadDiagnostic:
    source:      str
    kind:        str                     # network | http_status | parse | shape
    message:     str
    status_code: Optional[int] = None

    @classmethod
    def from_error(cls, source: str, exc) -> "LoadDiagnostic":
        return cls(
            source=source,
            kind=getattr(exc, "kind", "load"),
            message=str(exc),
            status_code=getattr(exc, "status_code", None),
        )
