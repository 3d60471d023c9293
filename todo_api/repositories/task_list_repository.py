"""
Repository for TaskList database operations
"""

from todo_api.db import db
from todo_api.models.task_list import TaskList


class TaskListRepository:
    """Repository for TaskList database operations"""

    @staticmethod
    def get_by_id(id):
        """Get TaskList by ID"""
        return db.session.get(TaskList, id)

    @staticmethod
    def get_all_for_user(user_id):
        """All TaskLists of a user, newest first"""
        return TaskList.query.filter_by(user_id=user_id).order_by(TaskList.created_at.desc()).all()

    @staticmethod
    def get_ids_for_user(user_id):
        """IDs of every TaskList owned by a user"""
        rows = db.session.query(TaskList.id).filter(TaskList.user_id == user_id).all()
        return [row[0] for row in rows]

    @staticmethod
    def add(**kwargs):
        """Stage a new TaskList record"""
        item = TaskList(**kwargs)
        db.session.add(item)
        return item

    @staticmethod
    def update(item, **kwargs):
        """Apply attribute changes to a TaskList"""
        for key, value in kwargs.items():
            if hasattr(item, key):
                setattr(item, key, value)
        return item

    @staticmethod
    def delete_by_id(id):
        """Delete a TaskList row; returns the number of rows removed"""
        return TaskList.query.filter(TaskList.id == id).delete(synchronize_session=False)
