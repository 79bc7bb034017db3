import os

from config.config import db_config_from_env, env_bool

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env(default_password="payroll", default_database="payroll_test")

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_INIT_DB = env_bool("AUTO_INIT_DB", "0")
APPLY_CONSOLIDATED_RELIEF = env_bool("APPLY_CONSOLIDATED_RELIEF", "0")
