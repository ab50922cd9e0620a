import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "shift_attendance"),
}

# Gate codes (shared secrets, exact match)
ADMIN_CODE = os.getenv("ADMIN_CODE", "ADMIN123")
HR_CODE = os.getenv("HR_CODE", "Akram")
# Per-manager overrides of the seeded passwords, e.g. {"QC_MGR": "..."}
MANAGER_PASSWORDS: dict[str, str] = {}

# Estimated OT pay = weighted OT hours x this rate
BASE_HOURLY_RATE = float(os.getenv("BASE_HOURLY_RATE", "10"))

# When enabled, managers can only approve/reject entries of their own section
ENFORCE_MANAGER_SECTION = bool(int(os.getenv("ENFORCE_MANAGER_SECTION", "0")))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
