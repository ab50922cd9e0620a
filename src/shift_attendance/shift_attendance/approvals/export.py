from __future__ import annotations

import csv
import io
from typing import Iterable

from ..core.constants import UNKNOWN_EMPLOYEE
from ..employees.directory import EmployeeDirectory
from ..shifts.model import ShiftEntry

CSV_COLUMNS = [
    "Date",
    "Employee ID",
    "Employee Name",
    "Department",
    "Section",
    "Shift Type",
    "Status",
    "Approved By",
    "Approved At",
    "Remark",
]


def entry_row(entry: ShiftEntry, directory: EmployeeDirectory) -> dict:
    """Read-model of one entry joined with its owner and approver."""

    owner = directory.get(entry.employee_id)
    approver = directory.get(entry.decided_by) if entry.decided_by else None

    if entry.decided_by:
        approved_by = approver.full_name if approver else entry.decided_by
    else:
        approved_by = "-"

    return {
        "Date": entry.work_date.strftime("%Y-%m-%d"),
        "Employee ID": entry.employee_id,
        "Employee Name": owner.full_name if owner else UNKNOWN_EMPLOYEE,
        "Department": owner.department.value if owner else UNKNOWN_EMPLOYEE,
        "Section": owner.section.value if owner and owner.section else "-",
        "Shift Type": entry.shift_type.label,
        "Status": entry.status.value,
        "Approved By": approved_by,
        "Approved At": entry.decided_at.strftime("%Y-%m-%d %H:%M:%S") if entry.decided_at else "-",
        "Remark": entry.other_remark or "",
    }


def export_entries_csv(entries: Iterable[ShiftEntry], directory: EmployeeDirectory) -> str:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=CSV_COLUMNS, lineterminator="\n")
    writer.writeheader()
    for entry in entries:
        writer.writerow(entry_row(entry, directory))
    return out.getvalue()
