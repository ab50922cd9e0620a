from __future__ import annotations

import re
from pathlib import Path

import pytest

from src.shift_attendance.shift_attendance.core.exceptions import NotFoundError, ValidationError
from src.shift_attendance.shift_attendance.database.record_store import (
    PROFILES,
    SHIFT_ENTRIES,
    prepare_insert,
    prepare_patch,
    table_spec,
)


def test_unknown_tables_and_columns_are_refused(store):
    with pytest.raises(ValidationError):
        table_spec("users; DROP TABLE profiles")
    with pytest.raises(ValidationError):
        store.select(PROFILES, {"password": "x"})
    with pytest.raises(ValidationError):
        store.select(PROFILES, order_by="salary")


def test_shift_entries_get_generated_id_and_timestamps():
    row = prepare_insert(table_spec(SHIFT_ENTRIES), {"employee_id": "EMP001", "shift_type": "leave"})

    assert len(row["id"]) == 32
    assert row["created_at"] is not None
    assert row["created_at"] == row["updated_at"]
    assert row["approved"] is None


def test_profiles_need_an_explicit_key():
    with pytest.raises(ValidationError):
        prepare_insert(table_spec(PROFILES), {"full_name": "No Id"})


def test_key_cannot_be_patched():
    with pytest.raises(ValidationError):
        prepare_patch(table_spec(PROFILES), {"id": "OTHER"})

    assert "updated_at" in prepare_patch(table_spec(PROFILES), {"is_approved": True})


def test_update_and_delete_of_missing_rows(store):
    with pytest.raises(NotFoundError):
        store.update(PROFILES, "NOPE", {"is_approved": True})
    with pytest.raises(NotFoundError):
        store.delete(PROFILES, "NOPE")


def test_schema_keeps_microseconds_on_timestamps():
    schema = (Path(__file__).resolve().parents[1] / "database" / "schema.sql").read_text(encoding="utf-8")
    columns = re.findall(r"^\s*(\w+)\s+DATETIME(\(6\))?", schema, flags=re.MULTILINE)

    assert {name for name, _ in columns} >= {"created_at", "updated_at", "approved_at", "last_login"}
    assert all(precision for _, precision in columns)
