"""
TaskList service - CRUD over a user's task lists
"""

import structlog

from todo_api.db import commit_or_raise
from todo_api.repositories.task_list_repository import TaskListRepository
from todo_api.services import cascade, ownership
from todo_api.utils import now_utc
from todo_api.validation import validate_task_list_payload

logger = structlog.get_logger('task_lists')


class TaskListService:

    @staticmethod
    def list_for_user(user_id):
        return TaskListRepository.get_all_for_user(user_id)

    @staticmethod
    def get(user_id, list_id):
        return ownership.assert_list_owned(user_id, list_id)

    @staticmethod
    def create(user_id, data):
        fields = validate_task_list_payload(data)
        task_list = TaskListRepository.add(user_id=user_id, **fields)
        commit_or_raise("create task list")
        logger.info(f"User {user_id} created task list {task_list.id}")
        return task_list

    @staticmethod
    def update(user_id, list_id, data):
        task_list = ownership.assert_list_owned(user_id, list_id)
        fields = validate_task_list_payload(data, partial=True)
        TaskListRepository.update(task_list, updated_at=now_utc(), **fields)
        commit_or_raise(f"update task list {list_id}")
        return task_list

    @staticmethod
    def delete(user_id, list_id):
        return cascade.delete_list(user_id, list_id)
