from __future__ import annotations

from typing import Optional

from flask import has_request_context, session


class FlaskSessionStorage:
    """Session-scoped storage living in the Flask (signed cookie) session.

    Each call goes through the ``flask.session`` proxy, so one instance can be
    shared by the container across requests. Outside a request there is no
    browser session: reads return None and writes are ignored.
    """

    def get_item(self, key: str) -> Optional[str]:
        if not has_request_context():
            return None
        return session.get(key)

    def set_item(self, key: str, value: str) -> None:
        if has_request_context():
            session[key] = str(value)

    def remove_item(self, key: str) -> None:
        if has_request_context():
            session.pop(key, None)
