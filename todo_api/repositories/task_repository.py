"""
Repository for Task database operations
"""

from todo_api.db import db
from todo_api.models.task import Task, TaskTag


class TaskRepository:
    """Repository for Task database operations"""

    @staticmethod
    def get_by_id(id):
        """Get Task by ID"""
        return db.session.get(Task, id)

    @staticmethod
    def find(clauses):
        """Tasks matching every clause, newest first"""
        return Task.query.filter(*clauses).order_by(Task.created_at.desc()).all()

    @staticmethod
    def add(**kwargs):
        """Stage a new Task record"""
        item = Task(**kwargs)
        db.session.add(item)
        return item

    @staticmethod
    def update(item, **kwargs):
        """Apply attribute changes to a Task"""
        for key, value in kwargs.items():
            if hasattr(item, key):
                setattr(item, key, value)
        return item

    @staticmethod
    def delete(item):
        """Stage deletion of a Task (its tags go with it)"""
        db.session.delete(item)

    @staticmethod
    def delete_by_task_list(task_list_id):
        """Bulk delete every Task of a TaskList, tags first; returns the task count"""
        task_ids = db.select(Task.id).where(Task.task_list_id == task_list_id)
        TaskTag.query.filter(TaskTag.task_id.in_(task_ids)).delete(synchronize_session=False)
        return Task.query.filter(Task.task_list_id == task_list_id).delete(synchronize_session=False)

