"""
Tests for model serialization
"""
from datetime import datetime

from todo_api.db import db
from todo_api.models import Task, TaskList, User


class TestModels:

    def test_repr(self, app_ctx):
        assert repr(Task(title='Write report', completed=True)) == '<Task Write report>'
        assert repr(TaskList(name='Work')) == '<TaskList Work>'
        assert repr(User(email='ana@example.com')) == '<User ana@example.com>'

    def test_to_dict_uses_camel_case(self, app_ctx):
        user = User(email='ana@example.com', password_hash='x')
        db.session.add(user)
        db.session.flush()
        task_list = TaskList(user_id=user.id, name='Work')
        db.session.add(task_list)
        db.session.flush()
        task = Task(task_list_id=task_list.id, title='Report', due_date=datetime(2024, 12, 31, 8, 5, 3, 42000))
        task.tags = ['a', 'b']
        db.session.add(task)
        db.session.commit()

        data = task.to_dict()
        assert data['taskListId'] == task_list.id
        assert data['dueDate'] == '2024-12-31T08:05:03.042Z'
        assert data['tags'] == ['a', 'b']
        assert data['completed'] is False
