from __future__ import annotations

import csv
import io
from datetime import date, datetime

from src.shift_attendance.shift_attendance.approvals.export import CSV_COLUMNS, entry_row, export_entries_csv
from src.shift_attendance.shift_attendance.core.enums import ShiftType
from src.shift_attendance.shift_attendance.shifts.model import Approved, Rejected, ShiftEntry


def _entry(employee_id="EMP001", approval=None, shift_type=ShiftType.THIRD_SHIFT, remark=None):
    kwargs = {"approval": approval} if approval else {}
    return ShiftEntry(
        entry_id="e1",
        employee_id=employee_id,
        work_date=date(2024, 3, 15),
        shift_type=shift_type,
        created_at=datetime(2024, 3, 15, 8, 0),
        other_remark=remark,
        **kwargs,
    )


def test_pending_row_uses_placeholders(container, approved_employee):
    row = entry_row(_entry(), container.directory)

    assert row == {
        "Date": "2024-03-15",
        "Employee ID": "EMP001",
        "Employee Name": "Asha Rao",
        "Department": "Engineering",
        "Section": "QC",
        "Shift Type": "3rd Shift",
        "Status": "Pending",
        "Approved By": "-",
        "Approved At": "-",
        "Remark": "",
    }


def test_decided_row_names_the_approver(container, approved_employee):
    approval = Approved(by="QC_MGR", at=datetime(2024, 3, 15, 10, 5, 7))

    row = entry_row(_entry(approval=approval), container.directory)

    assert row["Status"] == "Approved"
    assert row["Approved By"] == "QC Manager"
    assert row["Approved At"] == "2024-03-15 10:05:07"


def test_unknown_owner_and_approver(container):
    approval = Rejected(by="OLD_MGR", at=datetime(2024, 3, 16, 12, 0), justification="Wrong date given")

    row = entry_row(_entry(employee_id="GONE1", approval=approval, remark="Wrong date given"), container.directory)

    assert row["Employee Name"] == "Unknown"
    assert row["Department"] == "Unknown"
    assert row["Section"] == "-"
    assert row["Approved By"] == "OLD_MGR"
    assert row["Status"] == "Rejected"
    assert row["Remark"] == "Wrong date given"


def test_export_writes_header_and_rows(container, approved_employee):
    content = export_entries_csv([_entry(), _entry(shift_type=ShiftType.OT_OFF_DAY)], container.directory)

    rows = list(csv.reader(io.StringIO(content)))
    assert rows[0] == CSV_COLUMNS
    assert len(rows) == 3
    assert rows[2][CSV_COLUMNS.index("Shift Type")] == "OT as Off Day"


def test_export_of_nothing_is_header_only(container):
    assert export_entries_csv([], container.directory) == ",".join(CSV_COLUMNS) + "\n"
