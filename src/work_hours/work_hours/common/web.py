from __future__ import annotations

from functools import wraps
from typing import Any

from flask import current_app, g, jsonify, request


def request_data() -> dict[str, Any]:
    """JSON body, or form fields for plain HTML form posts."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "on", "yes"}
    return bool(value)


def ok(status: int = 200, **payload):
    return jsonify({"success": True, **payload}), status


def fail(message: str, status: int = 400):
    return jsonify({"success": False, "message": message}), status


def system_error(action: str, exc: Exception):
    current_app.logger.exception("Unexpected error while %s", action)
    if current_app.config.get("DEBUG", False):
        return fail(f"System error while {action}: {exc}", 500)
    return fail(f"System error while {action}", 500)


def login_required(container):
    """Decorator factory: rejects requests without a restored session."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            username = container.auth_service.current_user()
            if not username:
                return fail("Please log in to continue", 401)
            g.username = username
            return view(*args, **kwargs)

        return wrapper

    return decorator
