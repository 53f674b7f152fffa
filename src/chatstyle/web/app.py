from __future__ import annotations

from flask import Flask

from chatstyle.render import Renderer


def create_app(
    renderer: Renderer | None = None,
    config: dict | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(config or {})

    app.extensions["renderer"] = renderer or Renderer()

    from chatstyle.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
