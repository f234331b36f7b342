from __future__ import annotations

from flask import Flask, g

from ..common.web import fail, login_required, ok, request_data, system_error
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    requires_login = login_required(container)

    @app.route("/api/settings", endpoint="get_settings")
    @requires_login
    def get_settings():
        return ok(settings=container.settings_service.get_settings(g.username).to_dict())

    @app.route("/api/settings", methods=["PATCH", "PUT"], endpoint="update_settings")
    @requires_login
    def update_settings():
        try:
            settings = container.settings_service.update_settings(g.username, request_data())
            return ok(settings=settings.to_dict())
        except ValidationError as e:
            return fail(str(e), 400)
        except Exception as e:
            return system_error("saving settings", e)
