# app.py

import os
os.environ.setdefault("FLASK_APP", __name__)

from dotenv import load_dotenv
load_dotenv()

# Flask
from flask import Flask
from flask import session, request, current_app
from flask_babel import gettext

from extensions import babel

# Import Configurations
from config.settings import Config

# Catalog core
from models.device_store import DeviceStore
from controllers.device_loader import DeviceLoader, start_loader

# Import Blueprints
from routes.catalog import catalog_bp
from routes.language import language_bp


def get_locale():
    # 1) if they've set it in session, use that
    if 'lang' in session:
        return session['lang']
    # 2) otherwise auto-detect from the Accept-Language header
    return request.accept_languages.best_match(current_app.config["LANGUAGES"])


def create_app(test_config=None):
    app = Flask(
        __name__,
        template_folder="views",
        static_folder="public",
        static_url_path="/assets"   # public/ ↔ /assets
    )
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    # device text reaches the page only through escaped templates (.hbs too)
    app.jinja_env.autoescape = True

    babel.init_app(app,
                   locale_selector=get_locale,
                   default_locale=app.config["BABEL_DEFAULT_LOCALE"],
                   default_timezone=app.config["BABEL_DEFAULT_TIMEZONE"])

    @app.context_processor
    def inject_locale():
        return {'current_locale': session.get('lang', app.config["BABEL_DEFAULT_LOCALE"])}

    # Register template context
    @app.context_processor
    def inject_translation():
        return dict(t=gettext, app_version=app.config["APP_VERSION"])

    # Catalog state shared by all requests
    store  = DeviceStore()
    loader = DeviceLoader(
        store,
        app.config["DEVICES_SOURCE"],
        timeout=app.config["DEVICES_SOURCE_TIMEOUT"],
        logger=app.logger,
    )
    app.extensions["device_store"]  = store
    app.extensions["device_loader"] = loader

    # Register Blueprints before loading so no request is lost meanwhile
    app.register_blueprint(catalog_bp)
    app.register_blueprint(language_bp)

    # ---------- Device catalog ----------
    start_loader(loader, background=app.config["DEVICES_LOAD_ASYNC"])

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', port=8082)
