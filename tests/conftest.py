from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping, Optional

import pytest

from src.shift_attendance.shift_attendance.access.config import AccessConfig
from src.shift_attendance.shift_attendance.container import build_container
from src.shift_attendance.shift_attendance.core.exceptions import NotFoundError, StoreFailureError
from src.shift_attendance.shift_attendance.database.record_store import (
    check_columns,
    prepare_insert,
    prepare_patch,
    table_spec,
)


class InMemoryRecordStore:
    """Dict-backed RecordStore with the same contract as the MySQL one."""

    def __init__(self):
        self._tables: dict[str, dict[str, dict]] = {}
        self._seq: dict[tuple[str, str], int] = {}
        self._next = 0
        self.fail_on: Optional[str] = None

    def _rows(self, table: str) -> dict[str, dict]:
        return self._tables.setdefault(table, {})

    def select(
        self,
        table: str,
        filters: Optional[Mapping[str, Any]] = None,
        *,
        order_by: Optional[str] = None,
        descending: bool = False,
    ):
        spec = table_spec(table)
        filters = dict(filters or {})
        check_columns(spec, filters.keys())
        rows = [dict(r) for r in self._rows(table).values() if all(r.get(c) == v for c, v in filters.items())]
        if order_by is not None:
            check_columns(spec, [order_by])
            rows.sort(key=lambda r: (r[order_by], self._seq[(table, r[spec.key])]), reverse=descending)
        return rows

    def insert(self, table: str, row: Mapping[str, Any]) -> dict:
        if self.fail_on == table:
            raise StoreFailureError(f"Could not insert into {table}")
        spec = table_spec(table)
        out = prepare_insert(spec, row)
        self._next += 1
        self._seq[(table, out[spec.key])] = self._next
        self._rows(table)[out[spec.key]] = out
        return dict(out)

    def update(self, table: str, row_id: str, patch: Mapping[str, Any]) -> None:
        spec = table_spec(table)
        values = prepare_patch(spec, patch)
        rows = self._rows(table)
        if row_id not in rows:
            raise NotFoundError(f"{table} row {row_id!r} not found")
        rows[row_id].update(values)

    def delete(self, table: str, row_id: str) -> None:
        rows = self._rows(table)
        if row_id not in rows:
            raise NotFoundError(f"{table} row {row_id!r} not found")
        del rows[row_id]


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def container(store):
    return build_container(store=store, access_config=AccessConfig.build())


@pytest.fixture
def today() -> date:
    return date(2024, 3, 15)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 15, 9, 30, 0)


@pytest.fixture
def approved_employee(container):
    """Registers and approves an Engineering/QC employee, returns the profile."""

    container.registration_service.register(
        employee_id="emp001",
        full_name="Asha Rao",
        department="Engineering",
        section="QC",
    )
    return container.employee_admin_service.approve_employee("EMP001")
