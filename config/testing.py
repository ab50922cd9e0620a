import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "shift_attendance_test"),
}

ADMIN_CODE = "ADMIN123"
HR_CODE = "Akram"
MANAGER_PASSWORDS: dict[str, str] = {}

BASE_HOURLY_RATE = 10.0
ENFORCE_MANAGER_SECTION = False

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
