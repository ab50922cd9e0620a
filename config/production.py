import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "shift_attendance"),
}

ADMIN_CODE = os.getenv("ADMIN_CODE", "ADMIN123")
HR_CODE = os.getenv("HR_CODE", "Akram")
MANAGER_PASSWORDS: dict[str, str] = {}

BASE_HOURLY_RATE = float(os.getenv("BASE_HOURLY_RATE", "10"))
ENFORCE_MANAGER_SECTION = bool(int(os.getenv("ENFORCE_MANAGER_SECTION", "0")))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
