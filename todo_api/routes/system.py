"""
System Routes - health check and API index
"""

from datetime import datetime, timezone

from flask import Blueprint, jsonify

from todo_api.constants import API_NAME, API_VERSION

system_bp = Blueprint("system", __name__)


@system_bp.route("/health")
def health():
    """Simple health check endpoint"""
    return jsonify({
        "success": True,
        "message": "Server is running",
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    })


@system_bp.route("/")
def index():
    return jsonify({
        "success": True,
        "message": API_NAME,
        "version": API_VERSION,
        "endpoints": {
            "health": "/health",
            "auth": {
                "signup": "POST /api/auth/signup",
                "login": "POST /api/auth/login",
            },
            "taskLists": "GET/POST/PUT/DELETE /api/task-lists",
            "tasks": "GET/POST/PUT/PATCH/DELETE /api/tasks",
        },
    })
