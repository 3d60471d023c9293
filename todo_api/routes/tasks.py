"""
Task Routes - filtering, CRUD and completion toggle
"""

from flask import Blueprint, request

from todo_api.api_responses import created_response, list_response, success_response
from todo_api.middleware.auth import current_user_id, token_required
from todo_api.services.task_filter import TaskFilterCriteria
from todo_api.services.task_service import TaskService

tasks_bp = Blueprint("tasks", __name__, url_prefix="/api")


@tasks_bp.get("/tasks")
@token_required
def get_tasks():
    """Filters: taskListId, completed, priority, tags, dueDate, search"""
    criteria = TaskFilterCriteria.from_query_args(request.args)
    tasks = TaskService.list(current_user_id(), criteria)
    return list_response([task.to_dict() for task in tasks])


@tasks_bp.post("/tasks")
@token_required
def create_task():
    task = TaskService.create(current_user_id(), request.get_json(silent=True))
    return created_response(task.to_dict(), "Task created successfully")


@tasks_bp.get("/tasks/<task_id>")
@token_required
def get_task(task_id):
    task = TaskService.get(current_user_id(), task_id)
    return success_response(data=task.to_dict())


@tasks_bp.put("/tasks/<task_id>")
@token_required
def update_task(task_id):
    task = TaskService.update(current_user_id(), task_id, request.get_json(silent=True))
    return success_response(data=task.to_dict(), message="Task updated successfully")


@tasks_bp.patch("/tasks/<task_id>/toggle")
@token_required
def toggle_task(task_id):
    task = TaskService.toggle(current_user_id(), task_id)
    state = "completed" if task.completed else "uncompleted"
    return success_response(data=task.to_dict(), message=f"Task {state}")


@tasks_bp.delete("/tasks/<task_id>")
@token_required
def delete_task(task_id):
    TaskService.delete(current_user_id(), task_id)
    return success_response(message="Task deleted successfully")
