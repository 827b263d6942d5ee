import os

from .config import Config, DB_CONFIG

SECRET_KEY = Config.SECRET_KEY

DB_CONFIG = dict(DB_CONFIG)

DEBUG = True
LOG_LEVEL = "DEBUG" if Config.LOG_LEVEL == "INFO" else Config.LOG_LEVEL

BLOCKING_LOOKBACK_DAYS = Config.BLOCKING_LOOKBACK_DAYS

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
AUTO_SEED_DB = Config.AUTO_SEED_DB
