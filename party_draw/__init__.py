"""Flask application package."""

from __future__ import annotations

from typing import Any

from flask import Flask

try:
    from dotenv import load_dotenv
except Exception:  # pragma: no cover
    load_dotenv = None  # type: ignore[assignment]

def create_app(config_object: Any | None = None, storage: Any | None = None) -> Flask:
    """Application factory.

    Args:
        config_object: Config class to load instead of the APP_ENV default.
        storage: Key-value backend to use instead of STORAGE_BACKEND.

    Returns:
        Configured Flask application.
    """
    if load_dotenv is not None:
        load_dotenv()

    from party_draw.config import get_config
    from party_draw.error_handlers import register_error_handlers
    from party_draw.extensions import init_services
    from party_draw.logging_config import configure_logging
    from party_draw.routes.admin import admin_bp
    from party_draw.routes.health import health_bp
    from party_draw.routes.participants import participants_bp

    app = Flask(__name__)
    app.config.from_object(config_object or get_config())
    app.json.ensure_ascii = False

    configure_logging(app)
    init_services(app, storage=storage)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(participants_bp)
    app.register_blueprint(admin_bp, url_prefix="/api/admin")

    return app
