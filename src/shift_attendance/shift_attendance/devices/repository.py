from __future__ import annotations

from typing import Optional, Protocol


class DeviceRepository(Protocol):
    """Device id -> employee id bindings used for auto-login."""

    def find_employee(self, device_id: str) -> Optional[str]:
        raise NotImplementedError

    def bind(self, device_id: str, employee_id: str) -> None:
        """Create or re-point a binding and stamp last_login."""

        raise NotImplementedError
