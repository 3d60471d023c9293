"""
Model: Task

A task has no user column: its owner is the owner of its TaskList.
Tags live in TaskTag rows so the tag filter is a plain indexed lookup.
"""

from todo_api.constants import DEFAULT_PRIORITY
from todo_api.db import db
from todo_api.utils import format_datetime, new_id, now_utc


class TaskTag(db.Model):
    __tablename__ = "task_tags"

    id = db.Column(db.Integer, primary_key=True)
    task_id = db.Column(db.String(32), db.ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False, index=True)
    position = db.Column(db.Integer, nullable=False, default=0)
    name = db.Column(db.String(50), nullable=False, index=True)


class Task(db.Model):
    __tablename__ = "tasks"
    __table_args__ = (
        db.Index("ix_tasks_list_created", "task_list_id", "created_at"),
        db.Index("ix_tasks_list_completed", "task_list_id", "completed"),
        db.Index("ix_tasks_list_priority", "task_list_id", "priority"),
        db.Index("ix_tasks_list_due_date", "task_list_id", "due_date"),
    )

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    task_list_id = db.Column(db.String(32), db.ForeignKey("task_lists.id"), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.String(1000))
    completed = db.Column(db.Boolean, default=False, nullable=False)
    priority = db.Column(db.String(10), default=DEFAULT_PRIORITY, nullable=False)
    due_date = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, default=now_utc, nullable=False)
    updated_at = db.Column(db.DateTime, default=now_utc, onupdate=now_utc, nullable=False)

    tag_rows = db.relationship(
        "TaskTag",
        order_by="TaskTag.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def tags(self):
        return [row.name for row in self.tag_rows]

    @tags.setter
    def tags(self, names):
        self.tag_rows = [TaskTag(name=name, position=index) for index, name in enumerate(names or [])]

    def to_dict(self):
        return {
            "id": self.id,
            "taskListId": self.task_list_id,
            "title": self.title,
            "description": self.description,
            "completed": bool(self.completed),
            "priority": self.priority,
            "dueDate": format_datetime(self.due_date),
            "tags": self.tags,
            "createdAt": format_datetime(self.created_at),
            "updatedAt": format_datetime(self.updated_at),
        }

    def __repr__(self):
        return f"<Task {self.title}>"
