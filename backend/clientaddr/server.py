from __future__ import annotations

from flask import Flask
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix

from .config import Config
from .routes.health import bp as health_bp
from .routes.ip import bp as ip_bp
from .utils.logger import setup_logger


def create_app(config: dict | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    setup_logger(app)

    if app.config.get("TRUST_PROXY_HEADERS", False):
        # Only X-Forwarded-For feeds the resolver; host/proto/port are for url_for.
        app.wsgi_app = ProxyFix(
            app.wsgi_app,
            x_for=app.config.get("PROXY_FIX_X_FOR", 1),
            x_proto=1,
            x_host=1,
            x_port=1,
        )

    cors_origins = app.config.get("CORS_ORIGINS", "*")
    CORS(app, resources={r"/api/*": {"origins": cors_origins}})

    app.register_blueprint(health_bp, url_prefix="/api")
    app.register_blueprint(ip_bp, url_prefix="/api")

    return app
