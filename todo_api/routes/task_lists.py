"""
Task List Routes
"""

from flask import Blueprint, request

from todo_api.api_responses import created_response, list_response, success_response
from todo_api.middleware.auth import current_user_id, token_required
from todo_api.services.task_list_service import TaskListService

task_lists_bp = Blueprint("task_lists", __name__, url_prefix="/api")


@task_lists_bp.get("/task-lists")
@token_required
def get_task_lists():
    task_lists = TaskListService.list_for_user(current_user_id())
    return list_response([task_list.to_dict() for task_list in task_lists])


@task_lists_bp.post("/task-lists")
@token_required
def create_task_list():
    task_list = TaskListService.create(current_user_id(), request.get_json(silent=True))
    return created_response(task_list.to_dict(), "Task list created successfully")


@task_lists_bp.get("/task-lists/<list_id>")
@token_required
def get_task_list(list_id):
    task_list = TaskListService.get(current_user_id(), list_id)
    return success_response(data=task_list.to_dict())


@task_lists_bp.put("/task-lists/<list_id>")
@token_required
def update_task_list(list_id):
    task_list = TaskListService.update(current_user_id(), list_id, request.get_json(silent=True))
    return success_response(data=task_list.to_dict(), message="Task list updated successfully")


@task_lists_bp.delete("/task-lists/<list_id>")
@token_required
def delete_task_list(list_id):
    TaskListService.delete(current_user_id(), list_id)
    return success_response(message="Task list deleted successfully")
