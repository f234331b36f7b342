from __future__ import annotations

from flask import Flask, session

from ..common.web import as_bool, fail, ok, request_data, system_error
from ..core.exceptions import AuthError, DuplicateUserError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    auth = container.auth_service

    @app.route("/api/register", methods=["POST"], endpoint="register")
    def register_user():
        data = request_data()
        remember = as_bool(data.get("remember"))
        try:
            user = auth.register(data.get("username", ""), data.get("password", ""), remember=remember)
            session.permanent = remember
            return ok(201, user=user.username)
        except ValidationError as e:
            return fail(str(e), 400)
        except DuplicateUserError as e:
            return fail(str(e), 409)
        except Exception as e:
            return system_error("registering", e)

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = request_data()
        remember = as_bool(data.get("remember"))
        try:
            s_user = auth.login(data.get("username", ""), data.get("password", ""), remember=remember)
            session.permanent = remember
            return ok(user=s_user.username, remembered=s_user.remembered)
        except AuthError as e:
            return fail(str(e), 401)
        except Exception as e:
            return system_error("logging in", e)

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        auth.logout()
        session.clear()
        return ok()

    @app.route("/api/session", endpoint="current_session")
    def current_session():
        return ok(user=auth.current_user())
