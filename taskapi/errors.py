"""
Error types and the uniform JSON error body
"""

from flask import jsonify

LABELS = {401: "Unauthorized", 403: "Forbidden", 404: "Not Found"}


class ValidationError(Exception):
    """Raised when a request body or task field is malformed or missing."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


def error(code=400, message=None):
    return {
        "statusCode": code,
        "error": LABELS.get(code, "Bad Request"),
        "message": message,
    }


def not_found():
    return jsonify({"statusCode": 404, "error": "Not found"}), 404
