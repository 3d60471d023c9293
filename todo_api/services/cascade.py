"""
Cascade Delete Coordinator.

Removing a TaskList removes its tasks in the same transaction, so a
failure leaves both the list and its tasks in place and is reported.
"""

import structlog
from sqlalchemy.exc import SQLAlchemyError

from todo_api.db import db
from todo_api.exceptions import DatabaseException
from todo_api.repositories.task_list_repository import TaskListRepository
from todo_api.repositories.task_repository import TaskRepository
from todo_api.services import ownership

logger = structlog.get_logger('cascade')


def delete_list(user_id, list_id):
    """Delete an owned TaskList and all of its tasks; returns the task count"""
    task_list = ownership.assert_list_owned(user_id, list_id)
    list_id = task_list.id

    try:
        # Tasks reference the list, so they go first inside the transaction
        deleted_tasks = TaskRepository.delete_by_task_list(list_id)
        TaskListRepository.delete_by_id(list_id)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Cascade delete of task list {list_id} failed, nothing removed", exc_info=True)
        raise DatabaseException(f"Error deleting task list {list_id}: {e}")

    logger.info(f"Deleted task list {list_id} with {deleted_tasks} tasks")
    return deleted_tasks
