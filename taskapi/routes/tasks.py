import logging
import re
from typing import Optional

from flask import Blueprint, jsonify, session

from ..errors import error, not_found
from ..models.schemas import AddTaskBody, UpdateTaskBody, parse_body

logger = logging.getLogger(__name__)

LOGIN_HINT = "authenticate your session via /auth/cookie/login"

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_id(value) -> Optional[int]:
    """Read a task id the lenient way: leading digits count, anything else is None."""
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # past the interpreter's int conversion limit; no task has such an id
        return None


def require_session_identity():
    if not session.get("email"):
        logger.warning("Rejected unauthenticated request to a gated route")
        return jsonify(error(401, LOGIN_HINT)), 401
    return None


def create_tasks_blueprint(store, name="tasks", gated=False):
    """Build the CRUD routes over `store`. Gated blueprints require a logged-in session."""
    bp = Blueprint(name, __name__)

    if gated:
        bp.before_request(require_session_identity)

    @bp.route("/tasks", methods=["GET"])
    def get_tasks():
        return jsonify([task.to_dict() for task in store.list()])

    @bp.route("/task/<task_id>", methods=["GET"])
    def get_task(task_id):
        task = store.get_by_id(parse_id(task_id))
        if task is None:
            return not_found()
        return jsonify(task.to_dict())

    @bp.route("/task/<task_id>", methods=["DELETE"])
    def delete_task(task_id):
        task = store.get_by_id(parse_id(task_id))
        if task is None:
            return not_found()
        deleted = task.to_dict()
        store.delete_by_id(task.id)
        return jsonify(deleted)

    @bp.route("/tasks", methods=["POST"])
    def create_task():
        body = parse_body(AddTaskBody)
        task = store.create(body.title, body.completed)
        return jsonify(task.to_dict())

    @bp.route("/tasks", methods=["PUT"])
    def update_task():
        body = parse_body(UpdateTaskBody)
        task = store.update(parse_id(body.id), body.title, body.completed)
        if task is None:
            return not_found()
        return jsonify(task.to_dict())

    return bp
