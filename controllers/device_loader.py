# controllers/device_loader.py

"""
Device catalog loader.

Fetches the catalog once, checks it, and commits it to the DeviceStore.
Sources:

  * http:// or https:// URL  → GET via requests, cache bypassed
  * anything else            → path on the local filesystem

Any failure (transport, status, JSON, shape) leaves the store untouched,
is logged, and is published on the `device-load-failed` signal. load()
never raises; callers inspect the returned LoadResult or `status`.
"""

import json
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import requests

from controllers.diagnostics import LoadDiagnostic, device_load_failed, devices_loaded
from controllers.errors import (
    DeviceLoadError,
    HttpStatusError,
    LoadShapeError,
    NetworkError,
    ParseError,
)
from models.device import DeviceRecord
from models.device_store import DeviceStore

PENDING = "pending"
LOADED  = "loaded"
FAILED  = "failed"

NO_CACHE_HEADERS = {
    "Accept":        "application/json",
    "Cache-Control": "no-cache, no-store, max-age=0",
    "Pragma":        "no-cache",
}


@dataclass(frozen=True)
class LoadResult:
    ok:      bool
    devices: Tuple[DeviceRecord, ...] = ()
    error:   Optional[DeviceLoadError] = None

    @property
    def count(self) -> int:
        return len(self.devices)


def is_http_source(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


class DeviceLoader:

    def __init__(self, store: DeviceStore, source, *,
                 session=None, timeout: Optional[float] = None, logger=None):
        self.store   = store
        self.source  = str(source)
        self.session = session       # None: one short-lived Session per fetch
        self.timeout = timeout
        self.log     = logger or logging.getLogger(__name__)
        self.status  = PENDING
        self.last_error: Optional[DeviceLoadError] = None

    @property
    def failed(self) -> bool:
        return self.status == FAILED

    # ------------------------------------------------------------------
    # steps
    # ------------------------------------------------------------------
    def fetch(self) -> bytes:
        """Raw body of the source. Raises NetworkError / HttpStatusError."""
        if not is_http_source(self.source):
            try:
                return Path(self.source).read_bytes()
            except OSError as exc:
                raise NetworkError(f"cannot read {self.source}: {exc}") from exc

        if self.session is not None:
            return self._get(self.session)
        with requests.Session() as session:
            return self._get(session)

    def _get(self, session) -> bytes:
        try:
            resp = session.get(self.source, headers=NO_CACHE_HEADERS,
                               timeout=self.timeout)
        except requests.RequestException as exc:
            raise NetworkError(f"cannot reach {self.source}: {exc}") from exc

        if not 200 <= resp.status_code < 300:
            raise HttpStatusError(resp.status_code, resp.reason)
        return resp.content

    @staticmethod
    def parse(body: bytes):
        # deeply nested arrays exhaust the decoder's recursion limit
        try:
            return json.loads(body)
        except (ValueError, RecursionError) as exc:
            raise ParseError(f"device data is not valid JSON: {exc}") from exc

    @staticmethod
    def check_shape(payload) -> list:
        if not isinstance(payload, list):
            raise LoadShapeError("devices payload is not an array at the top level")
        return payload

    # ------------------------------------------------------------------
    # entry point
    # ------------------------------------------------------------------
    def load(self) -> LoadResult:
        self.log.info("📦 Loading devices from %s", self.source)
        try:
            payload = self.check_shape(self.parse(self.fetch()))
            self.store.set_all(payload)
        except DeviceLoadError as exc:
            return self._fail(exc)

        self.status     = LOADED
        self.last_error = None
        devices         = self.store.all()
        self.log.info("📦 Loaded %d devices", len(devices))
        devices_loaded.send(self, count=len(devices))
        return LoadResult(ok=True, devices=devices)

    def _fail(self, exc: DeviceLoadError) -> LoadResult:
        self.status     = FAILED
        self.last_error = exc
        self.log.error("Error loading devices from %s: [%s] %s",
                       self.source, exc.kind, exc)
        device_load_failed.send(
            self, diagnostic=LoadDiagnostic.from_error(self.source, exc)
        )
        return LoadResult(ok=False, error=exc)


# ── background start ───────────────────────────────────────────────────
def start_loader(loader: DeviceLoader, background: bool = True):
    """
    Run loader.load() once. In background mode it runs on a daemon thread
    and the thread is returned; otherwise the LoadResult is.
    """
    if not background:
        return loader.load()

    thread = threading.Thread(target=loader.load, name="DeviceLoader", daemon=True)
    thread.start()
    return thread
