import os

from config.config import db_config_from_env, env_bool

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = db_config_from_env(default_password="payroll")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_bool("AUTO_INIT_DB", "1")

# PAYE policy: subtract the consolidated relief allowance before applying brackets
APPLY_CONSOLIDATED_RELIEF = env_bool("APPLY_CONSOLIDATED_RELIEF", "0")
