# controllers/matcher.py

"""
Free-text device matching.

A query matches a device when, after trimming and case-folding, it is a
contiguous substring of the device's name, brand, category and id joined
by single spaces. No tokenising, no ranking.
"""

from typing import Iterable, List

from models.device import DeviceRecord

SEARCH_FIELDS = ("name", "brand", "category", "id")


def normalize_query(query) -> str:
    return (query or "").strip().casefold()


def haystack(device: DeviceRecord) -> str:
    """Searchable text of a device; absent fields are skipped entirely."""
    values = (getattr(device, field) for field in SEARCH_FIELDS)
    return " ".join(v for v in values if v).casefold()


def matches(query, device: DeviceRecord) -> bool:
    q = normalize_query(query)
    if not q:
        return True
    return q in haystack(device)


def filter_devices(query, devices: Iterable[DeviceRecord]) -> List[DeviceRecord]:
    """Devices matching query, in their original order."""
    q = normalize_query(query)
    if not q:
        return list(devices)
    return [d for d in devices if q in haystack(d)]
