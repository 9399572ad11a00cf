import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "http://0.0.0.0:8081"),
    "timeout": float(os.getenv("API_TIMEOUT", "15")),
}

CACHE_STALE_SECONDS = float(os.getenv("CACHE_STALE_SECONDS", "60"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
