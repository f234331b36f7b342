from __future__ import annotations

from flask import Flask, g

from ..charts.aggregation import aggregate_earnings, aggregate_hours
from ..common.web import login_required, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    requires_login = login_required(container)
    payroll = container.payroll_report_service

    @app.route("/api/cycle", endpoint="current_cycle")
    @requires_login
    def current_cycle():
        return ok(cycle=payroll.cycle_summary(g.username))

    @app.route("/api/charts", endpoint="charts")
    @requires_login
    def charts():
        user = container.store.get_by_username(g.username)
        return ok(
            hours=aggregate_hours(user.entries),
            earnings=aggregate_earnings(user.entries, user.settings, calculator=payroll.calculator),
        )
