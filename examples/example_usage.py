"""Example: use the service layer directly (without Flask).

Controllers are a thin layer; the business rules live in the services.
"""

import importlib
import sys
from datetime import date

from config import get_settings_module

from src.shift_attendance.shift_attendance.container import build_container


def main():
    employee_id = sys.argv[1] if len(sys.argv) > 1 else "EMP001"
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    month = date.today().strftime("%Y-%m")
    print(container.overtime_service.calculate(employee_id, month).to_dict())
    for week in container.roster_projector.project(employee_id, month).weeks:
        print(week)


if __name__ == "__main__":
    main()
