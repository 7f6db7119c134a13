"""Application factory and app-wide configuration."""

from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from fireplan.app.api.routes import api_bp
from fireplan.config import Config


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.from_object(Config)
    app.config.from_prefixed_env("FIREPLAN")
    if overrides:
        app.config.update(overrides)

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
