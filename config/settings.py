# config/settings.py

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def str_to_bool(value):
    truthy = ("true", "1", "yes", "on")
    falsey = ("false", "0", "no", "off")

    val = str(value).strip().lower()

    if val in truthy:
        return True
    elif val in falsey:
        return False
    else:
        raise ValueError(f"Invalid boolean string: '{value}'")


def str_to_float_or_none(value):
    if value is None or str(value).strip() == "":
        return None
    return float(value)


# Application version
APP_VERSION = os.environ.get("APP_VERSION", "1.0.0")
LOG_LEVEL   = os.environ.get("LOG_LEVEL", "INFO").upper()

# Device catalog source: http(s) URL or local path
DEVICES_SOURCE         = os.environ.get(
    "DEVICES_SOURCE", str(BASE_DIR / "public" / "data" / "devices.json")
)
DEVICES_SOURCE_TIMEOUT = str_to_float_or_none(os.environ.get("DEVICES_SOURCE_TIMEOUT"))
DEVICES_LOAD_ASYNC     = str_to_bool(os.environ.get("DEVICES_LOAD_ASYNC", "True"))


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or os.urandom(24)

    APP_VERSION = APP_VERSION
    LOG_LEVEL   = LOG_LEVEL

    # Device catalog
    DEVICES_SOURCE         = DEVICES_SOURCE
    DEVICES_SOURCE_TIMEOUT = DEVICES_SOURCE_TIMEOUT
    DEVICES_LOAD_ASYNC     = DEVICES_LOAD_ASYNC

    # BABEL
    LANGUAGES              = ['en', 'pt']
    BABEL_DEFAULT_LOCALE   = 'en'
    BABEL_DEFAULT_TIMEZONE = 'UTC'
