"""
Task service - CRUD and toggle for tasks, always through the two-hop
ownership check (task -> task list -> user).
"""

import structlog

from todo_api.db import commit_or_raise
from todo_api.repositories.task_repository import TaskRepository
from todo_api.services import ownership
from todo_api.services.task_filter import TaskFilterCriteria, find_tasks
from todo_api.utils import now_utc
from todo_api.validation import validate_task_payload

logger = structlog.get_logger('tasks')


class TaskService:

    @staticmethod
    def list(user_id, criteria=None):
        return find_tasks(user_id, criteria or TaskFilterCriteria())

    @staticmethod
    def get(user_id, task_id):
        task, _ = ownership.assert_task_owned(user_id, task_id)
        return task

    @staticmethod
    def create(user_id, data):
        fields = validate_task_payload(data)
        ownership.assert_list_owned(user_id, fields["task_list_id"])
        task = TaskRepository.add(**fields)
        commit_or_raise("create task")
        logger.info(f"Created task {task.id} in list {task.task_list_id}")
        return task

    @staticmethod
    def update(user_id, task_id, data):
        task, _ = ownership.assert_task_owned(user_id, task_id)
        fields = validate_task_payload(data, partial=True)
        TaskRepository.update(task, updated_at=now_utc(), **fields)
        commit_or_raise(f"update task {task_id}")
        return task

    @staticmethod
    def toggle(user_id, task_id):
        task, _ = ownership.assert_task_owned(user_id, task_id)
        TaskRepository.update(task, completed=not task.completed, updated_at=now_utc())
        commit_or_raise(f"toggle task {task_id}")
        return task

    @staticmethod
    def delete(user_id, task_id):
        task, _ = ownership.assert_task_owned(user_id, task_id)
        TaskRepository.delete(task)
        commit_or_raise(f"delete task {task_id}")
        logger.info(f"Deleted task {task_id}")
