from .config import Config, DB_CONFIG

SECRET_KEY = "test-secret"

DB_CONFIG = dict(DB_CONFIG)

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

BLOCKING_LOOKBACK_DAYS = Config.BLOCKING_LOOKBACK_DAYS

AUTO_INIT_DB = False
AUTO_SEED_DB = False
