from __future__ import annotations

import pytest

from chatstyle.registry import TemplateRegistry, ThemeRegistry
from chatstyle.render import Renderer
from chatstyle.web.app import create_app


@pytest.fixture
def renderer():
    templates = TemplateRegistry()
    templates.add({"card": '<div class="card">{{msg}}</div>', "broken": "<div>"})
    themes = ThemeRegistry()
    themes.add({"cardTheme": lambda palette: ".card { color: %s; }" % palette.get("c", "black")})
    return Renderer(templates=templates, themes=themes)


@pytest.fixture
def app(renderer):
    """Create a Flask app for testing."""
    application = create_app(renderer=renderer)
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
