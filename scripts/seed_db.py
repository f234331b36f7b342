from __future__ import annotations

import argparse
import importlib
import sys
from datetime import date, timedelta
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "work_hours"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from work_hours.container import build_container
from work_hours.core.exceptions import DuplicateUserError


def main() -> None:
    parser = argparse.ArgumentParser(description="Create a demo user with a few weeks of entries.")
    parser.add_argument("--username", default="demo")
    parser.add_argument("--password", default="demo")
    parser.add_argument("--rate", type=float, default=25.0)
    parser.add_argument("--days", type=int, default=30)
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    container = build_container(data_file=settings.DATA_FILE)

    try:
        container.auth_service.register(args.username, args.password)
    except DuplicateUserError:
        raise SystemExit(f"User {args.username!r} already exists in {settings.DATA_FILE}")

    container.settings_service.set_hourly_rate(args.username, args.rate)

    today = date.today()
    for offset in range(args.days, 0, -1):
        day = today - timedelta(days=offset)
        if day.weekday() >= 5:
            continue
        container.entry_service.add_entry(args.username, day, "09:00", "15:30")

    print(f"OK: Seeded {args.username!r} -> {settings.DATA_FILE}")


if __name__ == "__main__":
    main()
