"""
Model: TaskList
"""

from todo_api.db import db
from todo_api.utils import format_datetime, new_id, now_utc


class TaskList(db.Model):
    __tablename__ = "task_lists"
    __table_args__ = (
        db.Index("ix_task_lists_user_created", "user_id", "created_at"),
    )

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    user_id = db.Column(db.String(32), db.ForeignKey("users.id"), nullable=False, index=True)
    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.String(500))
    color = db.Column(db.String(7))  # Hex color
    created_at = db.Column(db.DateTime, default=now_utc, nullable=False)
    updated_at = db.Column(db.DateTime, default=now_utc, onupdate=now_utc, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "description": self.description,
            "color": self.color,
            "createdAt": format_datetime(self.created_at),
            "updatedAt": format_datetime(self.updated_at),
        }

    def __repr__(self):
        return f"<TaskList {self.name}>"
