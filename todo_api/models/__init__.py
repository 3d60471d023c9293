"""
Models package

- user.py: User accounts (login by email)
- task_list.py: TaskList, owned by one User
- task.py: Task and its ordered TaskTag rows; owned through its TaskList
"""

from .user import User
from .task_list import TaskList
from .task import Task, TaskTag

__all__ = [
    "User",
    "TaskList",
    "Task",
    "TaskTag",
]
