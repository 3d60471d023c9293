import os

CONFIG_DIR = os.environ.get('TODO_API_CONFIG_DIR', os.path.join(os.getcwd(), 'config'))
DB_FILE = os.path.join(CONFIG_DIR, 'todo_api.db')
CONFIG_FILE = os.environ.get('TODO_API_CONFIG', os.path.join(CONFIG_DIR, 'settings.yaml'))

TODO_API_DB = 'sqlite:///' + DB_FILE

API_NAME = 'Todo App API'
API_VERSION = '1.0.0'

# Only used when no JWT_SECRET is configured
DEV_JWT_SECRET = 'todo-api-dev-secret-change-in-production'
JWT_ALGORITHM = 'HS256'
TOKEN_EXPIRES_HOURS = 24

DEFAULT_SETTINGS = {
    "database": {
        "url": TODO_API_DB,
    },
    "auth": {
        "jwt_secret": None,
        "token_expires_hours": TOKEN_EXPIRES_HOURS,
        "login_rate_limit": "20 per minute",
    },
    "logging": {
        "level": "INFO",
        "format": "console",
    },
}

# Field limits
USER_NAME_MAX_LENGTH = 100
TASK_LIST_NAME_MAX_LENGTH = 100
TASK_LIST_DESCRIPTION_MAX_LENGTH = 500
TASK_TITLE_MAX_LENGTH = 200
TASK_DESCRIPTION_MAX_LENGTH = 1000
TASK_MAX_TAGS = 10
TAG_MAX_LENGTH = 50

COLOR_PATTERN = r'^#[0-9A-Fa-f]{6}$'

PRIORITY_LOW = 'low'
PRIORITY_MEDIUM = 'medium'
PRIORITY_HIGH = 'high'
PRIORITIES = [PRIORITY_LOW, PRIORITY_MEDIUM, PRIORITY_HIGH]
DEFAULT_PRIORITY = PRIORITY_MEDIUM
