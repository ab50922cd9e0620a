from __future__ import annotations

import logging

from ..common.validators import normalize_employee_id, require_non_empty
from ..core.exceptions import AuthenticationError, NotFoundError
from ..employees.model import EmployeeProfile
from .config import AccessConfig

logger = logging.getLogger(__name__)


class AccessService:
    """Use case: gate checks for admin, HR and section managers.

    Codes are shared secrets compared by exact string equality.
    """

    def __init__(self, config: AccessConfig):
        self._config = config

    def verify_admin(self, code: str) -> None:
        if code != self._config.admin_code:
            logger.warning("Rejected admin access code")
            raise AuthenticationError("Invalid administrator access code")

    def verify_hr(self, code: str) -> None:
        if code != self._config.hr_code:
            logger.warning("Rejected HR access code")
            raise AuthenticationError("Invalid HR access code")

    def managers(self) -> list[EmployeeProfile]:
        return list(self._config.managers.values())

    def authenticate_manager(self, manager_id: str, password: str) -> EmployeeProfile:
        manager_id = require_non_empty(manager_id, "Manager").upper()
        require_non_empty(password, "Password")

        expected = self._config.manager_passwords.get(manager_id)
        manager = self._config.managers.get(manager_id)
        if expected is None or manager is None or password != expected:
            logger.warning("Failed manager login for %s", manager_id)
            raise AuthenticationError("Invalid credentials")
        return manager

    def change_manager_password(self, *, admin_code: str, manager_id: str, new_password: str) -> None:
        self.verify_admin(admin_code)
        manager_id = normalize_employee_id(manager_id)
        new_password = require_non_empty(new_password, "New password")
        if manager_id not in self._config.manager_passwords:
            raise NotFoundError(f"Manager {manager_id} not found")

        self._config.manager_passwords[manager_id] = new_password
        logger.info("Password changed for manager %s", manager_id)
