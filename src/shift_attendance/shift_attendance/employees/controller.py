from __future__ import annotations

from flask import Flask, request, session

from ..common.web import domain_errors, fail, json_body, ok, role_required
from ..core.enums import SessionRole
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _sign_in_employee(profile) -> None:
        session.clear()
        session["role"] = SessionRole.EMPLOYEE.value
        session["employee_id"] = profile.employee_id

    @app.route("/register", methods=["POST"], endpoint="register_employee")
    @domain_errors
    def register_employee():
        data = json_body()
        profile = container.registration_service.register(
            employee_id=data.get("employee_id", ""),
            full_name=data.get("full_name", ""),
            department=data.get("department", ""),
            section=data.get("section") or None,
            device_id=data.get("device_id") or request.headers.get("X-Device-Id"),
        )
        _sign_in_employee(profile)
        return ok(201, profile=profile.to_dict(), message="Registration submitted, waiting for approval")

    @app.route("/employees/<employee_id>", methods=["GET"], endpoint="check_employee")
    @domain_errors
    def check_employee(employee_id: str):
        profile = container.registration_service.check_existing(employee_id)
        if not profile:
            return fail("Employee not found", 404)
        if profile.approved and session.get("role") in (None, SessionRole.EMPLOYEE.value):
            _sign_in_employee(profile)
        return ok(profile=profile.to_dict())

    @app.route("/auto-login", methods=["POST"], endpoint="auto_login")
    @domain_errors
    def auto_login():
        device_id = json_body().get("device_id") or request.headers.get("X-Device-Id")
        profile = container.registration_service.auto_detect(device_id)
        if not profile:
            return ok(profile=None)
        _sign_in_employee(profile)
        return ok(profile=profile.to_dict())

    @app.route("/admin/login", methods=["POST"], endpoint="admin_login")
    @domain_errors
    def admin_login():
        container.access_service.verify_admin(json_body().get("code", ""))
        session.clear()
        session["role"] = SessionRole.ADMIN.value
        return ok(message="Signed in as administrator")

    @app.route("/admin/employees", methods=["GET"], endpoint="admin_employees")
    @role_required(SessionRole.ADMIN)
    @domain_errors
    def admin_employees():
        svc = container.employee_admin_service
        return ok(
            pending=[p.to_dict() for p in svc.pending_employees()],
            approved=[p.to_dict() for p in svc.approved_employees()],
            managers=[m.to_dict() for m in container.access_service.managers()],
        )

    @app.route("/admin/employees/<employee_id>/approve", methods=["POST"], endpoint="approve_employee")
    @role_required(SessionRole.ADMIN)
    @domain_errors
    def approve_employee(employee_id: str):
        profile = container.employee_admin_service.approve_employee(employee_id)
        return ok(profile=profile.to_dict(), message=f"Employee {profile.employee_id} approved")

    @app.route("/admin/employees/<employee_id>/reject", methods=["POST"], endpoint="reject_employee")
    @role_required(SessionRole.ADMIN)
    @domain_errors
    def reject_employee(employee_id: str):
        container.employee_admin_service.reject_employee(employee_id)
        return ok(message=f"Employee {employee_id.upper()} has been deleted")

    @app.route("/admin/managers/<manager_id>/password", methods=["POST"], endpoint="change_manager_password")
    @role_required(SessionRole.ADMIN)
    @domain_errors
    def change_manager_password(manager_id: str):
        data = json_body()
        container.access_service.change_manager_password(
            admin_code=data.get("admin_code", ""),
            manager_id=manager_id,
            new_password=data.get("new_password", ""),
        )
        return ok(message="Password updated")

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok(message="Signed out")
