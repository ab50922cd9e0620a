from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import now_local
from ..database.record_store import DEVICE_REGISTRATIONS, RecordStore
from .repository import DeviceRepository


class StoreDeviceRepository(DeviceRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def find_employee(self, device_id: str) -> Optional[str]:
        rows = self._store.select(DEVICE_REGISTRATIONS, {"device_id": device_id})
        return rows[0]["employee_id"] if rows else None

    def bind(self, device_id: str, employee_id: str) -> None:
        now = now_local()
        if self._store.select(DEVICE_REGISTRATIONS, {"device_id": device_id}):
            self._store.update(DEVICE_REGISTRATIONS, device_id, {"employee_id": employee_id, "last_login": now})
        else:
            self._store.insert(
                DEVICE_REGISTRATIONS,
                {"device_id": device_id, "employee_id": employee_id, "last_login": now},
            )
