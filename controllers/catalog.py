# controllers/catalog.py

"""
Request-side glue between Flask and the catalog core: per-session store
views, load-state aware list rendering and the JSON endpoints.
"""

from dataclasses import asdict

from flask import abort, current_app, jsonify, request, session

from controllers.detail_renderer import render_detail
from controllers.list_renderer import render_list, render_load_failure
from models.device_store import DeviceStore
from models.views import ListView

SESSION_KEY = "active_device_id"


# ── STORE / LOADER ACCESS ─────────────────────────────────────────────
def catalog_store() -> DeviceStore:
    return current_app.extensions["device_store"]


def catalog_loader():
    return current_app.extensions["device_loader"]


def session_store() -> DeviceStore:
    """The shared catalog, with this browser session's selection applied."""
    return catalog_store().with_selection(session.get(SESSION_KEY))


def select_device(store: DeviceStore, device_id) -> bool:
    """Select in store and remember it in the session; unknown ids are a no-op."""
    if not store.select(device_id):
        current_app.logger.debug("Ignored selection of unknown device %r", device_id)
        return False
    session[SESSION_KEY] = device_id
    return True


def current_query() -> str:
    return request.args.get("q", "", type=str)


# ── VIEWS ──────────────────────────────────────────────────────────────
def build_list(query: str, store: DeviceStore) -> ListView:
    if catalog_loader().failed:
        return render_load_failure(query)
    return render_list(query, store.all(), store.active_device_id)


def build_detail(store: DeviceStore):
    device = store.active_device()
    return render_detail(device) if device else None


# ── JSON ───────────────────────────────────────────────────────────────
def list_devices():
    store = session_store()
    view  = build_list(current_query(), store)
    return jsonify({
        "query":  view.query,
        "status": catalog_loader().status,
        "rows": [
            dict(asdict(row), placeholder=row.is_placeholder)
            for row in view.rows
        ],
    })


def get_device(device_id):
    device = catalog_store().find_by_id(device_id)
    if device is None:
        abort(404, "Unknown device")
    return jsonify(asdict(render_detail(device)))
