"""Application factory and app-wide configuration."""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from growthlab.app.api.routes import api_bp
from growthlab.config import Settings, settings as default_settings


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    app = Flask(__name__)
    app.config["GROWTHLAB_SETTINGS"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.CORS_ORIGINS}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
