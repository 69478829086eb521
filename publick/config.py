from os import environ

DB_CONNECTION_STRING = environ.get("DB_CONNECTION_STRING", "sqlite://publick.db")

ADMIN_TOKEN = environ.get("ADMIN_TOKEN", None)

BACKUP_BASE_URL = environ.get("BACKUP_BASE_URL", "http://127.0.0.1:8000")

RECAPTCHA_TIMEOUT = float(environ.get("RECAPTCHA_TIMEOUT", 10))

LOG_LEVEL = environ.get("LOG_LEVEL", "INFO").upper()
