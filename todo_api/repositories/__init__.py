"""
Repositories package

Each repository encapsulates database operations for a model:
- user_repository.py
- task_list_repository.py
- task_repository.py

Usage:
    from todo_api.repositories.task_repository import TaskRepository
    task = TaskRepository.get_by_id(task_id)

Repositories stage changes on the session; services own the commit.
"""
