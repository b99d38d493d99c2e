import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "payroll-dev-secret"

    # Input exports
    DATA_DIR = os.environ.get("PAYROLL_DATA_DIR", "data")
    ATTENDANCE_CSV = os.environ.get("ATTENDANCE_CSV", os.path.join(DATA_DIR, "attendance.csv"))
    EMPLOYEE_CSV = os.environ.get("EMPLOYEE_CSV", os.path.join(DATA_DIR, "employees.csv"))

    # Standard shift
    SHIFT_START = os.environ.get("SHIFT_START", "08:00")
    SHIFT_END = os.environ.get("SHIFT_END", "17:00")
    GRACE_MINUTES = int(os.environ.get("GRACE_MINUTES", "10"))
    BREAK_START = os.environ.get("BREAK_START", "12:00")
    BREAK_END = os.environ.get("BREAK_END", "13:00")

    OVERTIME_MULTIPLIER = float(os.environ.get("OVERTIME_MULTIPLIER", "1.25"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


DATA_CONFIG = {
    "attendance_csv": Config.ATTENDANCE_CSV,
    "employee_csv": Config.EMPLOYEE_CSV,
}

SHIFT_POLICY = {
    "start": Config.SHIFT_START,
    "end": Config.SHIFT_END,
    "grace_minutes": Config.GRACE_MINUTES,
    "break_start": Config.BREAK_START,
    "break_end": Config.BREAK_END,
}
