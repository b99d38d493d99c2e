import os

from .config import SHIFT_POLICY, Config

SECRET_KEY = "test-secret"

DATA_CONFIG = {
    "attendance_csv": os.getenv("ATTENDANCE_CSV", "tests/data/attendance.csv"),
    "employee_csv": os.getenv("EMPLOYEE_CSV", "tests/data/employees.csv"),
}
SHIFT_POLICY = dict(SHIFT_POLICY)
OVERTIME_MULTIPLIER = Config.OVERTIME_MULTIPLIER

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_LOAD_ATTENDANCE = bool(int(os.getenv("AUTO_LOAD_ATTENDANCE", "0")))
