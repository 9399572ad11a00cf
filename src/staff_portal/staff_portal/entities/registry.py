"""Entity screens served by the generic record routes."""

from .mails import MAILS
from .messages import MESSAGES
from .projects import PROJECTS
from .staff import STAFF
from .tasks import TASKS
from .timesheets import TIMESHEETS

ENTITY_PAGES = (STAFF, PROJECTS, TASKS, TIMESHEETS, MAILS, MESSAGES)
