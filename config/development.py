import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "http://0.0.0.0:8081"),
    "timeout": float(os.getenv("API_TIMEOUT", "15")),
}

# 0 keeps cached collections until a mutation invalidates them
CACHE_STALE_SECONDS = float(os.getenv("CACHE_STALE_SECONDS", "0"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
