from __future__ import annotations

from datetime import date

from flask import Flask, request, session

from ..common.validators import require_enum
from ..common.web import csv_response, domain_errors, json_body, ok, optional_date, role_required
from ..core.constants import ADMIN_ID
from ..core.enums import Department, Section, SessionRole, ShiftType
from ..container import Container
from .export import entry_row, export_entries_csv
from .service import EntryFilters


def register(app: Flask, container: Container) -> None:
    engine = container.approval_engine

    def _filters(*, with_org: bool) -> EntryFilters:
        args = request.args
        return EntryFilters(
            work_date=optional_date(args.get("date")),
            employee_id=(args.get("employee_id") or "").strip().upper() or None,
            shift_type=require_enum(args["shift_type"], ShiftType, "shift type") if args.get("shift_type") else None,
            department=(
                require_enum(args["department"], Department, "department")
                if with_org and args.get("department")
                else None
            ),
            section=require_enum(args["section"], Section, "section") if with_org and args.get("section") else None,
        )

    def _rows(entries) -> list[dict]:
        return [{"id": e.entry_id, **entry_row(e, container.directory)} for e in entries]

    def _approver_id() -> str:
        if session.get("role") == SessionRole.ADMIN.value:
            return ADMIN_ID
        return session["employee_id"]

    @app.route("/manager/login", methods=["POST"], endpoint="manager_login")
    @domain_errors
    def manager_login():
        data = json_body()
        manager = container.access_service.authenticate_manager(data.get("manager_id", ""), data.get("password", ""))
        session.clear()
        session["role"] = SessionRole.MANAGER.value
        session["employee_id"] = manager.employee_id
        session["section"] = manager.section.value
        return ok(manager=manager.to_dict())

    @app.route("/manager/pending", methods=["GET"], endpoint="manager_pending")
    @role_required(SessionRole.MANAGER)
    @domain_errors
    def manager_pending():
        return ok(entries=_rows(engine.pending_for(session["section"])))

    @app.route("/manager/history", methods=["GET"], endpoint="manager_history")
    @role_required(SessionRole.MANAGER)
    @domain_errors
    def manager_history():
        entries = engine.history_for(session["section"], _filters(with_org=False))
        return ok(entries=_rows(entries))

    @app.route("/manager/employees", methods=["GET"], endpoint="manager_employees")
    @role_required(SessionRole.MANAGER)
    @domain_errors
    def manager_employees():
        return ok(employees=[p.to_dict() for p in engine.section_employees(session["section"])])

    @app.route("/manager/entries/<entry_id>/approve", methods=["POST"], endpoint="approve_entry")
    @role_required(SessionRole.MANAGER, SessionRole.ADMIN)
    @domain_errors
    def approve_entry(entry_id: str):
        entry = engine.approve(entry_id, _approver_id())
        return ok(entry=entry.to_dict(), message="Shift approved")

    @app.route("/manager/entries/<entry_id>/reject", methods=["POST"], endpoint="reject_entry")
    @role_required(SessionRole.MANAGER, SessionRole.ADMIN)
    @domain_errors
    def reject_entry(entry_id: str):
        entry = engine.reject(entry_id, _approver_id(), json_body().get("justification", ""))
        return ok(entry=entry.to_dict(), message="Shift rejected")

    @app.route("/manager/export.csv", methods=["GET"], endpoint="manager_export_csv")
    @role_required(SessionRole.MANAGER)
    @domain_errors
    def manager_export_csv():
        section = session["section"]
        content = export_entries_csv(engine.section_entries(section), container.directory)
        filename = f"{section.lower().replace(' ', '-')}-shifts-{date.today():%Y-%m-%d}.csv"
        return csv_response(app, content, filename=filename)

    @app.route("/refresh", methods=["POST"], endpoint="refresh")
    @role_required(SessionRole.MANAGER, SessionRole.HR, SessionRole.ADMIN)
    @domain_errors
    def refresh():
        container.directory.refresh()
        return ok(message="Data refreshed")

    @app.route("/hr/login", methods=["POST"], endpoint="hr_login")
    @domain_errors
    def hr_login():
        container.access_service.verify_hr(json_body().get("code", ""))
        session.clear()
        session["role"] = SessionRole.HR.value
        return ok(message="Signed in as HR")

    @app.route("/hr/entries", methods=["GET"], endpoint="hr_entries")
    @role_required(SessionRole.HR)
    @domain_errors
    def hr_entries():
        return ok(entries=_rows(engine.hr_view(_filters(with_org=True))))

    @app.route("/hr/export.csv", methods=["GET"], endpoint="hr_export_csv")
    @role_required(SessionRole.HR)
    @domain_errors
    def hr_export_csv():
        content = export_entries_csv(engine.hr_view(_filters(with_org=True)), container.directory)
        return csv_response(app, content, filename=f"shift-data-{date.today():%Y-%m-%d}.csv")
