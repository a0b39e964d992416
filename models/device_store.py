# models/device_store.py

"""
In-memory device catalog.

The store holds the loaded collection plus the id of the selected device.
The collection is swapped in as a whole by set_all(); nothing edits it
afterwards. Request handlers work on a with_selection() view so every
browser session keeps its own selection over the shared collection.
"""

import logging
from typing import Dict, Iterator, Optional, Tuple

from controllers.errors import LoadShapeError, SelectionMiss
from models.device import DeviceRecord

log = logging.getLogger(__name__)

_EMPTY: Tuple[Tuple[DeviceRecord, ...], Dict[str, DeviceRecord], bool] = ((), {}, False)


class DeviceStore:

    def __init__(self):
        # (devices, index by id, loaded) - replaced as one reference
        self._catalog = _EMPTY
        self.active_device_id: Optional[str] = None

    # ------------------------------------------------------------------
    # collection
    # ------------------------------------------------------------------
    def set_all(self, records) -> None:
        """
        Replace the whole collection.

        records must be a list/tuple of DeviceRecord or decoded JSON objects.
        Everything is validated first; the store is only touched once the
        full payload has passed.
        """
        if not isinstance(records, (list, tuple)):
            raise LoadShapeError("devices payload is not an array at the top level")

        devices = tuple(
            r if isinstance(r, DeviceRecord) else DeviceRecord.from_dict(r, i)
            for i, r in enumerate(records)
        )

        index: Dict[str, DeviceRecord] = {}
        for dev in devices:
            if dev.id in index:
                raise LoadShapeError(f"duplicate device id '{dev.id}'")
            index[dev.id] = dev

        self._catalog = (devices, index, True)

    def all(self) -> Tuple[DeviceRecord, ...]:
        """Return the collection in load order."""
        return self._catalog[0]

    @property
    def is_loaded(self) -> bool:
        return self._catalog[2]

    def find_by_id(self, device_id) -> Optional[DeviceRecord]:
        return self._catalog[1].get(device_id)

    def require(self, device_id) -> DeviceRecord:
        """Like find_by_id() but raises SelectionMiss for unknown ids."""
        dev = self.find_by_id(device_id)
        if dev is None:
            raise SelectionMiss(device_id)
        return dev

    # ------------------------------------------------------------------
    # selection
    # ------------------------------------------------------------------
    def select(self, device_id) -> bool:
        """
        Mark device_id as active. Unknown ids leave the selection unchanged.
        Returns True when the selection was applied.
        """
        try:
            self.require(device_id)
        except SelectionMiss as miss:
            log.debug("Selection ignored: %s", miss)
            return False
        self.active_device_id = device_id
        return True

    def active_device(self) -> Optional[DeviceRecord]:
        if self.active_device_id is None:
            return None
        return self.find_by_id(self.active_device_id)

    def with_selection(self, device_id) -> "DeviceStore":
        """
        A view over the same collection with its own selection.
        An unknown or empty device_id gives a view with nothing selected.
        """
        view = DeviceStore()
        view._catalog = self._catalog
        if device_id is not None:
            view.select(device_id)
        return view

    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.all())

    def __iter__(self) -> Iterator[DeviceRecord]:
        return iter(self.all())

    def __repr__(self):
        return f"<DeviceStore {len(self)} devices active={self.active_device_id!r}>"
