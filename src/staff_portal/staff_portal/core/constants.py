"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DEFAULT_API_BASE_URL = "http://0.0.0.0:8081"
DEFAULT_API_TIMEOUT = 15

# Session key under which the bearer credential is persisted.
TOKEN_STORAGE_KEY = "token"

UNKNOWN_LABEL = "Unknown"

GENERIC_API_ERROR = "An error occurred"
INVALID_CREDENTIALS = "Invalid credentials"

TASK_PREVIEW_CHARS = 50
MESSAGE_PREVIEW_CHARS = 100

# Cache keys, one per collection.
STAFF_KEY = "staff"
PROJECTS_KEY = "projects"
TASKS_KEY = "tasks"
TIMESHEETS_KEY = "timesheets"
MAILS_KEY = "mails"
MESSAGES_KEY = "messages"
ADMIN_USERS_KEY = "admin/users"
ADMIN_GROUPS_KEY = "admin/groups"
ADMIN_PERMISSIONS_KEY = "admin/permissions"
