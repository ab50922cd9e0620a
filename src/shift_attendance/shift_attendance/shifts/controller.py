from __future__ import annotations

from flask import Flask, session

from ..common.datetime_utils import parse_iso_date
from ..common.web import domain_errors, json_body, month_arg, ok, role_required
from ..core.enums import SessionRole
from ..container import Container


def register(app: Flask, container: Container) -> None:
    employee_required = role_required(SessionRole.EMPLOYEE)

    @app.route("/shifts/dates", methods=["GET"], endpoint="shift_dates")
    @employee_required
    @domain_errors
    def shift_dates():
        options = container.shift_service.available_dates(session["employee_id"])
        return ok(dates=[o.to_dict() for o in options])

    @app.route("/shifts", methods=["POST"], endpoint="submit_shift")
    @employee_required
    @domain_errors
    def submit_shift():
        data = json_body()
        entry = container.shift_service.submit(
            employee_id=session["employee_id"],
            work_date=parse_iso_date(data.get("date", "")),
            shift_type=data.get("shift_type", ""),
            other_remark=data.get("other_remark"),
        )
        return ok(201, entry=entry.to_dict(), message="Shift submitted, waiting for approval")

    @app.route("/shifts/history", methods=["GET"], endpoint="shift_history")
    @employee_required
    @domain_errors
    def shift_history():
        entries = container.shift_service.history(session["employee_id"])
        return ok(entries=[e.to_dict() for e in entries])

    @app.route("/roster", methods=["GET"], endpoint="roster")
    @employee_required
    @domain_errors
    def roster():
        month = container.roster_projector.project(session["employee_id"], month_arg())
        return ok(roster=month.to_dict())

    @app.route("/overtime", methods=["GET"], endpoint="overtime")
    @employee_required
    @domain_errors
    def overtime():
        summary = container.overtime_service.calculate(session["employee_id"], month_arg())
        return ok(summary=summary.to_dict())
