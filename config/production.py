import os

from config.config import db_config_from_env, env_bool

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = db_config_from_env()

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = env_bool("AUTO_INIT_DB", "0")
APPLY_CONSOLIDATED_RELIEF = env_bool("APPLY_CONSOLIDATED_RELIEF", "0")
