from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Protocol, Sequence

import mysql.connector

from ..common.datetime_utils import now_local
from ..core.exceptions import NotFoundError, StoreFailureError, ValidationError
from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchall

logger = logging.getLogger(__name__)

PROFILES = "profiles"
SHIFT_ENTRIES = "shift_entries"
DEVICE_REGISTRATIONS = "device_registrations"


@dataclass(frozen=True)
class TableSpec:
    name: str
    key: str
    columns: tuple[str, ...]
    generated_key: bool = False

    @property
    def timestamped(self) -> bool:
        return "created_at" in self.columns


TABLES: dict[str, TableSpec] = {
    PROFILES: TableSpec(
        name=PROFILES,
        key="id",
        columns=("id", "full_name", "department", "section", "role", "is_approved", "created_at", "updated_at"),
    ),
    SHIFT_ENTRIES: TableSpec(
        name=SHIFT_ENTRIES,
        key="id",
        columns=(
            "id",
            "employee_id",
            "date",
            "shift_type",
            "other_remark",
            "approved",
            "approved_by",
            "approved_at",
            "created_at",
            "updated_at",
        ),
        generated_key=True,
    ),
    DEVICE_REGISTRATIONS: TableSpec(
        name=DEVICE_REGISTRATIONS,
        key="device_id",
        columns=("device_id", "employee_id", "last_login"),
    ),
}


def table_spec(table: str) -> TableSpec:
    spec = TABLES.get(table)
    if spec is None:
        raise ValidationError(f"Unknown table: {table}")
    return spec


def check_columns(spec: TableSpec, columns) -> None:
    unknown = [c for c in columns if c not in spec.columns]
    if unknown:
        raise ValidationError(f"Unknown column(s) for {spec.name}: {', '.join(sorted(unknown))}")


def prepare_insert(spec: TableSpec, row: Mapping[str, Any]) -> dict[str, Any]:
    """Fill store-assigned values (generated key, timestamps) for a new row."""

    check_columns(spec, row.keys())
    out = {c: None for c in spec.columns}
    out.update(row)
    if spec.generated_key and not out.get(spec.key):
        out[spec.key] = uuid.uuid4().hex
    if not out.get(spec.key):
        raise ValidationError(f"Missing key '{spec.key}' for {spec.name}")
    if spec.timestamped:
        now = now_local()
        out["created_at"] = out.get("created_at") or now
        out["updated_at"] = out.get("updated_at") or now
    return out


def prepare_patch(spec: TableSpec, patch: Mapping[str, Any]) -> dict[str, Any]:
    check_columns(spec, patch.keys())
    if spec.key in patch:
        raise ValidationError(f"Key '{spec.key}' of {spec.name} cannot be updated")
    out = dict(patch)
    if spec.timestamped:
        out["updated_at"] = now_local()
    return out


class RecordStore(Protocol):
    """Generic table store used by the repositories.

    Each call is one independent, atomic operation; no retries.
    """

    def select(
        self,
        table: str,
        filters: Optional[Mapping[str, Any]] = None,
        *,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> Sequence[dict]:
        raise NotImplementedError

    def insert(self, table: str, row: Mapping[str, Any]) -> dict:
        """Insert a row and return it with store-assigned values filled in."""

        raise NotImplementedError

    def update(self, table: str, row_id: str, patch: Mapping[str, Any]) -> None:
        """Raises NotFoundError when no row has that id."""

        raise NotImplementedError

    def delete(self, table: str, row_id: str) -> None:
        """Raises NotFoundError when no row has that id."""

        raise NotImplementedError


class MySQLRecordStore(RecordStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _run(self, action: str, table: str, fn):
        try:
            return fn()
        except mysql.connector.Error as e:
            logger.exception("Store %s on %s failed", action, table)
            raise StoreFailureError(f"Could not {action} {table}") from e

    def select(
        self,
        table: str,
        filters: Optional[Mapping[str, Any]] = None,
        *,
        order_by: Optional[str] = None,
        descending: bool = False,
    ) -> Sequence[dict]:
        spec = table_spec(table)
        filters = dict(filters or {})
        check_columns(spec, filters.keys())
        if order_by is not None:
            check_columns(spec, [order_by])

        clauses = ["1=1"]
        params: list[object] = []
        for col, value in filters.items():
            if value is None:
                clauses.append(f"`{col}` IS NULL")
            else:
                clauses.append(f"`{col}`=%s")
                params.append(value)

        sql = f"SELECT {', '.join(f'`{c}`' for c in spec.columns)} FROM `{spec.name}` WHERE {' AND '.join(clauses)}"
        if order_by is not None:
            sql += f" ORDER BY `{order_by}` {'DESC' if descending else 'ASC'}"

        def fn():
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(sql, tuple(params))
                return fetchall(cur)

        return self._run("select", table, fn)

    def insert(self, table: str, row: Mapping[str, Any]) -> dict:
        spec = table_spec(table)
        out = prepare_insert(spec, row)
        cols = list(spec.columns)

        def fn():
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"INSERT INTO `{spec.name}`({', '.join(f'`{c}`' for c in cols)}) "
                    f"VALUES({','.join(['%s'] * len(cols))})",
                    tuple(out[c] for c in cols),
                )
            return out

        return self._run("insert into", table, fn)

    def update(self, table: str, row_id: str, patch: Mapping[str, Any]) -> None:
        spec = table_spec(table)
        values = prepare_patch(spec, patch)
        if not values:
            return
        assignments = ", ".join(f"`{c}`=%s" for c in values)

        def fn():
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"UPDATE `{spec.name}` SET {assignments} WHERE `{spec.key}`=%s",
                    tuple(values.values()) + (row_id,),
                )
                return cur.rowcount

        if self._run("update", table, fn) <= 0:
            raise NotFoundError(f"{spec.name} row {row_id!r} not found")

    def delete(self, table: str, row_id: str) -> None:
        spec = table_spec(table)

        def fn():
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(f"DELETE FROM `{spec.name}` WHERE `{spec.key}`=%s", (row_id,))
                return cur.rowcount

        if self._run("delete from", table, fn) <= 0:
            raise NotFoundError(f"{spec.name} row {row_id!r} not found")
