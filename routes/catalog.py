# routes/catalog.py

from flask import Blueprint, render_template

from controllers.catalog import (
    build_detail,
    build_list,
    current_query,
    get_device,
    list_devices,
    select_device,
    session_store,
)

catalog_bp = Blueprint("catalog", __name__)


def _page(query, store):
    return render_template(
        "catalog/index.hbs",
        query=query,
        results=build_list(query, store),
        detail=build_detail(store),
    )


# ── PAGE ──────────────────────────────────────────────────────────────
@catalog_bp.route("/")
def index():
    return _page(current_query(), session_store())


# ── RESULT LIST FRAGMENT (re-rendered on every keystroke) ────────────
@catalog_bp.route("/results")
def results():
    store = session_store()
    return render_template("catalog/_results.hbs",
                           results=build_list(current_query(), store))


# ── SELECTION ─────────────────────────────────────────────────────────
@catalog_bp.route("/devices/<path:device_id>")
def select(device_id):
    store = session_store()
    select_device(store, device_id)
    return _page(current_query(), store)


@catalog_bp.route("/detail/<path:device_id>")
def detail(device_id):
    store = session_store()
    if not select_device(store, device_id):
        # keep whatever detail the page already shows
        return ("", 204)
    return render_template("catalog/_detail.hbs", detail=build_detail(store))


# ── JSON ──────────────────────────────────────────────────────────────
@catalog_bp.route("/api/devices")
def devices_data():
    return list_devices()


@catalog_bp.route("/api/devices/<path:device_id>")
def device_data(device_id):
    return get_device(device_id)
