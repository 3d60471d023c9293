"""
Ownership Guard.

TaskLists carry their owner directly. Tasks do not: a task belongs to
whoever owns its TaskList, so task checks always take the second hop.
A resource owned by someone else is reported exactly like a missing one.
"""

import structlog

from todo_api.exceptions import NotFoundException
from todo_api.repositories.task_list_repository import TaskListRepository
from todo_api.repositories.task_repository import TaskRepository

logger = structlog.get_logger('ownership')

TASK_LIST_NOT_FOUND = "Task list not found"
TASK_NOT_FOUND = "Task not found"


def assert_list_owned(user_id, list_id):
    """Return the TaskList if ``user_id`` owns it, else NotFoundException"""
    task_list = TaskListRepository.get_by_id(list_id) if list_id else None
    if task_list is None or task_list.user_id != user_id:
        logger.info(f"Task list {list_id} not visible to user {user_id}")
        raise NotFoundException(TASK_LIST_NOT_FOUND)
    return task_list


def assert_task_owned(user_id, task_id):
    """Return (task, task_list) if the task's list is owned by ``user_id``"""
    task = TaskRepository.get_by_id(task_id) if task_id else None
    if task is None:
        logger.info(f"Task {task_id} does not exist")
        raise NotFoundException(TASK_NOT_FOUND)

    task_list = TaskListRepository.get_by_id(task.task_list_id)
    if task_list is None or task_list.user_id != user_id:
        logger.info(f"Task {task_id} not visible to user {user_id}")
        raise NotFoundException(TASK_NOT_FOUND)

    return task, task_list


def owned_list_ids(user_id):
    """Every TaskList id owned by ``user_id`` (possibly empty)"""
    return TaskListRepository.get_ids_for_user(user_id)
