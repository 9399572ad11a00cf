SECRET_KEY = "test-secret"

API_CONFIG = {
    "base_url": "http://api.test",
    "timeout": 5,
}

CACHE_STALE_SECONDS = 0

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
