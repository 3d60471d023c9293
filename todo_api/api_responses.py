"""
API Response Utilities - the success/failure envelope shared by every endpoint

Success: {"success": true, "message"?: str, "count"?: int, "data"?: ...}
Failure: {"success": false, "error": str}
"""

from flask import jsonify


def success_response(data=None, message=None, count=None, status_code=200):
    """
    Standard success response format for API endpoints
    """
    response = {"success": True}

    if message:
        response["message"] = message

    if count is not None:
        response["count"] = count

    if data is not None:
        response["data"] = data

    return jsonify(response), status_code


def list_response(items, message=None):
    """Success envelope for collections, with the item count"""
    return success_response(data=items, message=message, count=len(items))


def created_response(data, message):
    return success_response(data=data, message=message, status_code=201)


def error_response(message, status_code=400):
    """
    Standard error response format for API endpoints
    """
    return jsonify({"success": False, "error": message}), status_code
