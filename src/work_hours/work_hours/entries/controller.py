from __future__ import annotations

import io

from flask import Flask, g, send_file

from ..common.web import fail, login_required, ok, request_data, system_error
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    requires_login = login_required(container)
    entries = container.entry_service

    @app.route("/api/entries", endpoint="list_entries")
    @requires_login
    def list_entries():
        return ok(entries=[e.to_dict() for e in entries.list_entries(g.username)])

    @app.route("/api/entries", methods=["POST"], endpoint="add_entry")
    @requires_login
    def add_entry():
        data = request_data()
        try:
            entry = entries.add_entry(g.username, data.get("date"), data.get("clockIn"), data.get("clockOut"))
            return ok(201, entry=entry.to_dict())
        except ValidationError as e:
            # InvalidRangeError included
            return fail(str(e), 400)
        except Exception as e:
            return system_error("adding entry", e)

    @app.route("/api/entries/<int:entry_id>", methods=["DELETE"], endpoint="delete_entry")
    @requires_login
    def delete_entry(entry_id: int):
        entries.remove_entry(g.username, entry_id)
        return ok()

    @app.route("/api/entries/export", endpoint="export_entries")
    @requires_login
    def export_entries():
        try:
            content = entries.export_entries(g.username)
        except Exception as e:
            return system_error("exporting entries", e)
        return send_file(
            io.BytesIO(content),
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            as_attachment=True,
            download_name=f"work_hours_{g.username}.xlsx",
        )
