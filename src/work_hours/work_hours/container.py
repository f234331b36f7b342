from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from .entries.service import EntryService
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.service import PayrollReportService
from .settings.service import SettingsService
from .storage.base import KeyValueStorage
from .storage.json_file_storage import JsonFileStorage
from .storage.memory_storage import MemoryStorage
from .users.service import AuthService
from .users.session import SessionStore
from .users.tracker_store import TrackerStore


@dataclass(frozen=True)
class Container:
    durable_storage: KeyValueStorage
    session_storage: KeyValueStorage

    store: TrackerStore
    sessions: SessionStore

    auth_service: AuthService
    settings_service: SettingsService
    entry_service: EntryService
    payroll_report_service: PayrollReportService


def build_container(
    *,
    data_file: Optional[Union[str, Path]] = None,
    durable_storage: Optional[KeyValueStorage] = None,
    session_storage: Optional[KeyValueStorage] = None,
    remember_storage: Optional[KeyValueStorage] = None,
    clock_millis: Optional[Callable[[], int]] = None,
) -> Container:
    """Wire storages, store and services; loads the store once (startup).

    ``remember_storage`` holds the remembered login and defaults to the durable
    storage. A served app passes the browser session, so one browser's
    remembered login never leaks into another.
    """
    if durable_storage is None:
        durable_storage = JsonFileStorage(data_file) if data_file else MemoryStorage()
    if session_storage is None:
        session_storage = MemoryStorage()

    store = TrackerStore(durable_storage)
    store.load()
    if remember_storage is None:
        remember_storage = durable_storage
    sessions = SessionStore(remember_storage, session_storage)

    calculator = StandardPayrollCalculator()
    return Container(
        durable_storage=durable_storage,
        session_storage=session_storage,
        store=store,
        sessions=sessions,
        auth_service=AuthService(store, sessions),
        settings_service=SettingsService(store),
        entry_service=EntryService(store, clock_millis=clock_millis),
        payroll_report_service=PayrollReportService(store, calculator=calculator),
    )
