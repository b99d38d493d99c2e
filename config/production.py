import os

from .config import DATA_CONFIG, SHIFT_POLICY, Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATA_CONFIG = dict(DATA_CONFIG)
SHIFT_POLICY = dict(SHIFT_POLICY)
OVERTIME_MULTIPLIER = Config.OVERTIME_MULTIPLIER

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

AUTO_LOAD_ATTENDANCE = bool(int(os.getenv("AUTO_LOAD_ATTENDANCE", "1")))
