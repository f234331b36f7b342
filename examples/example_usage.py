"""Example: using the service layer without Flask.

Goal: controllers are a thin layer, the business rules live in services.
"""

import sys
from datetime import date
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "work_hours"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from work_hours.charts.aggregation import aggregate_hours
from work_hours.container import build_container


def main():
    container = build_container()
    container.auth_service.register("alice", "secret")
    container.settings_service.update_settings("alice", {"hourlyRate": 20, "dailyHours": 7})

    container.entry_service.add_entry("alice", "2024-03-04", "09:00", "17:30")
    container.entry_service.add_entry("alice", "2024-03-05", "09:00", "16:00")

    print(container.payroll_report_service.cycle_summary("alice", today=date(2024, 3, 10)))
    print(aggregate_hours(container.store.get_by_username("alice").entries))


if __name__ == "__main__":
    main()
