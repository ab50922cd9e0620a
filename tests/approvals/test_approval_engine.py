from __future__ import annotations

from datetime import timedelta

import pytest

from src.shift_attendance.shift_attendance.approvals.service import ApprovalEngine, EntryFilters
from src.shift_attendance.shift_attendance.core.enums import ApprovalStatus, Department, Section, ShiftType
from src.shift_attendance.shift_attendance.core.exceptions import (
    AuthorizationError,
    InvalidTransitionError,
    JustificationTooShortError,
    NotFoundError,
)


@pytest.fixture
def engine(container, fixed_now):
    return ApprovalEngine(container.entries_repo, container.directory, clock=lambda: fixed_now)


@pytest.fixture
def rtg_employee(container):
    container.registration_service.register(
        employee_id="EMP002", full_name="Bilal Khan", department="Engineering", section="RTG"
    )
    return container.employee_admin_service.approve_employee("EMP002")


def _submit(container, employee_id, today, shift_type="1st_shift", offset=0):
    return container.shift_service.submit(
        employee_id=employee_id,
        work_date=today + timedelta(days=offset),
        shift_type=shift_type,
        today=today,
    )


def test_approve_records_approver_and_time(container, engine, approved_employee, today, fixed_now):
    entry = _submit(container, "EMP001", today)

    decided = engine.approve(entry.entry_id, "QC_MGR")

    assert decided.status == ApprovalStatus.APPROVED
    assert decided.decided_by == "QC_MGR"
    assert decided.decided_at == fixed_now
    stored = container.entries_repo.get_by_id(entry.entry_id)
    assert stored.status == ApprovalStatus.APPROVED
    assert stored.decided_by == "QC_MGR"


def test_repeat_approve_keeps_first_decision(container, approved_employee, today, fixed_now):
    entry = _submit(container, "EMP001", today)
    first = ApprovalEngine(container.entries_repo, container.directory, clock=lambda: fixed_now)
    later = ApprovalEngine(
        container.entries_repo, container.directory, clock=lambda: fixed_now + timedelta(hours=2)
    )

    first.approve(entry.entry_id, "QC_MGR")
    again = later.approve(entry.entry_id, "ADMIN")

    assert again.decided_by == "QC_MGR"
    assert again.decided_at == fixed_now


def test_reject_requires_ten_character_justification(container, engine, approved_employee, today):
    entry = _submit(container, "EMP001", today)

    for too_short in (None, "", "x", "x" * 9):
        with pytest.raises(JustificationTooShortError):
            engine.reject(entry.entry_id, "QC_MGR", too_short)
    assert container.entries_repo.get_by_id(entry.entry_id).is_pending

    rejected = engine.reject(entry.entry_id, "QC_MGR", "y" * 10)
    assert rejected.status == ApprovalStatus.REJECTED
    assert rejected.other_remark == "y" * 10


def test_reject_overwrites_remark_with_justification(container, engine, approved_employee, today):
    entry = container.shift_service.submit(
        employee_id="EMP001", work_date=today, shift_type="other", other_remark="Offsite audit", today=today
    )

    engine.reject(entry.entry_id, "QC_MGR", "Not on the audit plan")

    stored = container.entries_repo.get_by_id(entry.entry_id)
    assert stored.other_remark == "Not on the audit plan"
    assert stored.approval.justification == "Not on the audit plan"


def test_decided_entries_cannot_flip(container, engine, approved_employee, today):
    approved = _submit(container, "EMP001", today)
    rejected = _submit(container, "EMP001", today, offset=1)
    engine.approve(approved.entry_id, "QC_MGR")
    engine.reject(rejected.entry_id, "QC_MGR", "Shift not scheduled")

    with pytest.raises(InvalidTransitionError):
        engine.reject(approved.entry_id, "QC_MGR", "Changed my mind now")
    with pytest.raises(InvalidTransitionError):
        engine.approve(rejected.entry_id, "QC_MGR")
    assert engine.reject(rejected.entry_id, "QC_MGR", "Second rejection").other_remark == "Shift not scheduled"


def test_only_managers_and_admin_decide(container, engine, approved_employee, today):
    entry = _submit(container, "EMP001", today)

    with pytest.raises(AuthorizationError):
        engine.approve(entry.entry_id, "EMP001")
    with pytest.raises(NotFoundError):
        engine.approve("missing", "QC_MGR")

    assert engine.approve(entry.entry_id, "ADMIN").decided_by == "ADMIN"


def test_queues_are_section_scoped(container, engine, approved_employee, rtg_employee, today):
    qc_entry = _submit(container, "EMP001", today)
    rtg_entry = _submit(container, "EMP002", today)

    assert [e.entry_id for e in engine.pending_for("QC")] == [qc_entry.entry_id]
    assert [e.entry_id for e in engine.pending_for(Section.RTG)] == [rtg_entry.entry_id]
    assert engine.pending_for("MES") == []

    engine.approve(qc_entry.entry_id, "QC_MGR")
    assert engine.pending_for("QC") == []
    assert [e.entry_id for e in engine.history_for("QC")] == [qc_entry.entry_id]
    assert engine.history_for("RTG") == []
    assert [p.employee_id for p in engine.section_employees("QC")] == ["EMP001"]


def test_section_check_is_off_by_default(container, engine, approved_employee, today):
    entry = _submit(container, "EMP001", today)

    assert engine.approve(entry.entry_id, "RTG_MGR").decided_by == "RTG_MGR"


def test_section_check_when_enforced(container, approved_employee, today, fixed_now):
    strict = ApprovalEngine(
        container.entries_repo, container.directory, enforce_section=True, clock=lambda: fixed_now
    )
    entry = _submit(container, "EMP001", today)

    with pytest.raises(AuthorizationError):
        strict.approve(entry.entry_id, "RTG_MGR")
    assert strict.approve(entry.entry_id, "QC_MGR").decided_by == "QC_MGR"


def test_history_filters(container, engine, approved_employee, today):
    a = _submit(container, "EMP001", today, shift_type="1st_shift")
    b = _submit(container, "EMP001", today, shift_type="ot_off_day", offset=1)
    engine.approve(a.entry_id, "QC_MGR")
    engine.approve(b.entry_id, "QC_MGR")

    by_type = engine.history_for("QC", EntryFilters(shift_type=ShiftType.OT_OFF_DAY))
    by_date = engine.history_for("QC", EntryFilters(work_date=today))
    by_other_emp = engine.history_for("QC", EntryFilters(employee_id="EMP999"))

    assert [e.entry_id for e in by_type] == [b.entry_id]
    assert [e.entry_id for e in by_date] == [a.entry_id]
    assert by_other_emp == []


def test_hr_view_filters_by_department_and_section(container, engine, approved_employee, rtg_employee, today):
    container.registration_service.register(employee_id="FIN1", full_name="Chen Li", department="Finance")
    container.employee_admin_service.approve_employee("FIN1")
    qc = _submit(container, "EMP001", today)
    _submit(container, "EMP002", today)
    fin = _submit(container, "FIN1", today)

    assert len(engine.hr_view()) == 3
    assert [e.entry_id for e in engine.hr_view(EntryFilters(department=Department.FINANCE))] == [fin.entry_id]
    assert [
        e.entry_id
        for e in engine.hr_view(EntryFilters(department=Department.ENGINEERING, section=Section.QC))
    ] == [qc.entry_id]
    assert engine.hr_view(EntryFilters(section=Section.QC)) == []


def test_entries_of_deleted_employee_stay_visible(container, engine, approved_employee, today):
    entry = _submit(container, "EMP001", today)
    container.employee_admin_service.reject_employee("EMP001")

    assert [e.entry_id for e in engine.hr_view()] == [entry.entry_id]
    assert engine.pending_for("QC") == []
