# config.py - settings read from the environment once at import
import os


def _getenv_bool(key, default=False):
    value = os.getenv(key, str(default)).lower()
    return value in ("1", "true", "yes", "y", "on")


def _getenv_int(key, default):
    try:
        return int(os.getenv(key, str(default)))
    except ValueError:
        raise ValueError(f"Invalid integer value for {key}: {os.getenv(key)}")


def _getenv_list(key, default):
    return [item.strip() for item in os.getenv(key, default).split(",") if item.strip()]


HOST = os.getenv("HOST", "0.0.0.0")
PORT = _getenv_int("PORT", 5000)
DEBUG = _getenv_bool("FLASK_DEBUG", False)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Optional newline-delimited file of extra disallowed passwords
BLOCKLIST_FILE = os.getenv("PASSWORD_BLOCKLIST_FILE", "")

ALLOWED_ORIGINS = _getenv_list("ALLOWED_ORIGINS", "*")
