import os

from .config import DATA_CONFIG, SHIFT_POLICY, Config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DATA_CONFIG = dict(DATA_CONFIG)
SHIFT_POLICY = dict(SHIFT_POLICY)
OVERTIME_MULTIPLIER = Config.OVERTIME_MULTIPLIER

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, the attendance export is read and aggregated on startup
AUTO_LOAD_ATTENDANCE = bool(int(os.getenv("AUTO_LOAD_ATTENDANCE", "1")))
