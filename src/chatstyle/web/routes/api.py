from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

api_bp = Blueprint("api", __name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


@api_bp.route("/render", methods=["OPTIONS"])
def render_preflight():
    """Handle CORS preflight for rendering."""
    return "", 204


@api_bp.route("/templates")
def list_templates():
    renderer = current_app.extensions["renderer"]
    return jsonify({"templates": renderer.templates.names()})


@api_bp.route("/themes")
def list_themes():
    renderer = current_app.extensions["renderer"]
    return jsonify({"themes": renderer.themes.names()})


@api_bp.route("/render", methods=["POST"])
def render():
    """Render a template with a theme via JSON API."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or "template" not in data or "theme" not in data:
        return jsonify({"error": "template and theme required"}), 400

    content = data.get("content") or {}
    palette = data.get("palette") or {}
    if not isinstance(content, dict) or not isinstance(palette, dict):
        return jsonify({"error": "content and palette must be objects"}), 400

    renderer = current_app.extensions["renderer"]
    result = renderer.render(
        data["template"],
        content,
        data["theme"],
        palette,
        strict=bool(data.get("strict", False)),
    )
    body = {
        "ok": result.ok,
        "html": result.text,
        "error": result.error.value if result.error else None,
        "message": result.message,
        "diagnostics": [
            {"rule": d.rule, "severity": d.severity.value, "message": d.message}
            for d in result.diagnostics
        ],
    }
    return jsonify(body), (200 if result.ok else 422)
