# controllers/list_renderer.py

from typing import Iterable, Optional

from controllers.matcher import filter_devices
from models.device import DeviceRecord
from models.views import LOAD_FAILED, NO_RESULTS, ListRow, ListView, Placeholder
from utils.formatting import join_present

NO_RESULTS_MESSAGE  = "No devices found. Try a different model or brand."
LOAD_FAILED_MESSAGE = "Could not load device data. Check the server log for details."


def device_meta(device: DeviceRecord) -> str:
    """Brand · Category, whichever of the two is present."""
    return join_present(device.brand, device.category)


def render_row(device: DeviceRecord, active_device_id: Optional[str]) -> ListRow:
    return ListRow(
        id=device.id,
        name=device.name,
        meta=device_meta(device),
        is_active=device.id == active_device_id,
    )


def render_list(query, devices: Iterable[DeviceRecord],
                active_device_id: Optional[str] = None) -> ListView:
    """
    Build the result list for query.

    The list is rebuilt from scratch on every call. An empty result gives
    exactly one NO_RESULTS placeholder row.
    """
    query    = query or ""
    filtered = filter_devices(query, devices)
    if not filtered:
        return ListView(query=query,
                        rows=(Placeholder(NO_RESULTS, NO_RESULTS_MESSAGE),))

    return ListView(
        query=query,
        rows=tuple(render_row(d, active_device_id) for d in filtered),
    )


def render_load_failure(query="") -> ListView:
    """The one message shown in place of the list after a failed load."""
    return ListView(query=query or "",
                    rows=(Placeholder(LOAD_FAILED, LOAD_FAILED_MESSAGE),))
