"""
Request payload validation for task lists and tasks.

Each validator takes the decoded JSON body and returns a dict of model
attributes. With ``partial=True`` only keys present in the body are
validated and returned, which is what PUT uses.
"""
import re

from todo_api.constants import (
    COLOR_PATTERN,
    PRIORITIES,
    TAG_MAX_LENGTH,
    TASK_DESCRIPTION_MAX_LENGTH,
    TASK_LIST_DESCRIPTION_MAX_LENGTH,
    TASK_LIST_NAME_MAX_LENGTH,
    TASK_MAX_TAGS,
    TASK_TITLE_MAX_LENGTH,
    USER_NAME_MAX_LENGTH,
)
from todo_api.exceptions import ValidationException
from todo_api.utils import parse_datetime

_color_re = re.compile(COLOR_PATTERN)


def require_json_object(data):
    if not isinstance(data, dict):
        raise ValidationException("Request body must be a JSON object")
    return data


def _clean_text(value, field, max_length, required=False, label=None):
    label = label or field
    if value is None:
        if required:
            raise ValidationException(f"{label} is required")
        return None
    if not isinstance(value, str):
        raise ValidationException(f"{label} must be a string")
    value = value.strip()
    if not value:
        if required:
            raise ValidationException(f"{label} is required")
        return None
    if len(value) > max_length:
        raise ValidationException(f"{label} cannot exceed {max_length} characters")
    return value


def validate_credentials(data):
    """email/password/name for signup and login"""
    require_json_object(data)
    email = data.get("email")
    password = data.get("password")
    if not email or not password or not isinstance(email, str) or not isinstance(password, str):
        raise ValidationException("Email and password are required")
    email = email.strip()
    if not email:
        raise ValidationException("Email and password are required")
    name = _clean_text(data.get("name"), "name", USER_NAME_MAX_LENGTH, label="Name")
    return email, password, name


def validate_task_list_payload(data, partial=False):
    require_json_object(data)
    cleaned = {}

    if not partial or "name" in data:
        if not partial and not data.get("name"):
            raise ValidationException("Task list name is required")
        cleaned["name"] = _clean_text(
            data.get("name"), "name", TASK_LIST_NAME_MAX_LENGTH, required=True, label="Task list name"
        )

    if "description" in data:
        cleaned["description"] = _clean_text(
            data.get("description"), "description", TASK_LIST_DESCRIPTION_MAX_LENGTH, label="Description"
        )

    if "color" in data:
        color = data.get("color")
        if color is not None:
            if not isinstance(color, str) or not _color_re.match(color.strip()):
                raise ValidationException("Color must be a valid hex color code")
            color = color.strip()
        cleaned["color"] = color

    return cleaned


def validate_priority(value):
    if value not in PRIORITIES:
        raise ValidationException(f"Priority must be one of: {', '.join(PRIORITIES)}")
    return value


def validate_tags(value):
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(tag, str) for tag in value):
        raise ValidationException("Tags must be a list of strings")
    tags = [tag.strip() for tag in value if tag.strip()]
    if len(tags) > TASK_MAX_TAGS:
        raise ValidationException(f"Cannot have more than {TASK_MAX_TAGS} tags")
    for tag in tags:
        if len(tag) > TAG_MAX_LENGTH:
            raise ValidationException(f"Tag cannot exceed {TAG_MAX_LENGTH} characters")
    return tags


def validate_due_date(value):
    if value is None or value == "":
        return None
    try:
        return parse_datetime(value)
    except ValueError:
        raise ValidationException("Due date must be a valid ISO date")


def validate_task_payload(data, partial=False):
    require_json_object(data)
    cleaned = {}

    if not partial:
        if not data.get("taskListId") or not data.get("title"):
            raise ValidationException("Task list ID and title are required")
        if not isinstance(data["taskListId"], str):
            raise ValidationException("Task list ID must be a string")
        cleaned["task_list_id"] = data["taskListId"]

    if not partial or "title" in data:
        cleaned["title"] = _clean_text(
            data.get("title"), "title", TASK_TITLE_MAX_LENGTH, required=True, label="Task title"
        )

    if "description" in data:
        cleaned["description"] = _clean_text(
            data.get("description"), "description", TASK_DESCRIPTION_MAX_LENGTH, label="Description"
        )

    if "completed" in data:
        if not isinstance(data["completed"], bool):
            raise ValidationException("Completed must be a boolean")
        cleaned["completed"] = data["completed"]

    if "priority" in data:
        priority = data.get("priority")
        # An empty priority on create falls back to the model default
        if priority or partial:
            cleaned["priority"] = validate_priority(priority)

    if "dueDate" in data:
        cleaned["due_date"] = validate_due_date(data.get("dueDate"))

    if "tags" in data:
        cleaned["tags"] = validate_tags(data.get("tags"))

    return cleaned
