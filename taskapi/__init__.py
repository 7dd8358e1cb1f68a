"""
Task API: CRUD over an in-memory task list, served once in the open
and once behind a cookie session under /auth/cookie.
"""

import logging

from flask import Flask, jsonify, request, send_from_directory
from werkzeug.exceptions import HTTPException

from .config import Config
from .errors import ValidationError, error
from .routes import auth_bp, create_tasks_blueprint
from .services import MemorySessionStore, TaskStore
from .sessions import StoreSessionInterface

logger = logging.getLogger(__name__)


def create_app(test_config=None, task_store=None, session_store=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    app.config.from_prefixed_env("TASKAPI")
    if test_config is not None:
        app.config.update(test_config)

    if not app.config.get("SECRET_KEY"):
        raise RuntimeError("SECRET_KEY is not configured; set TASKAPI_SECRET_KEY")

    app.json.sort_keys = False

    if task_store is None:
        task_store = TaskStore()
    if session_store is None:
        session_store = MemorySessionStore(ttl=app.config["SESSION_TTL_SECONDS"])
    app.session_interface = StoreSessionInterface(session_store)

    app.register_blueprint(create_tasks_blueprint(task_store, "tasks"))
    app.register_blueprint(
        create_tasks_blueprint(task_store, "cookie_tasks", gated=True),
        url_prefix="/auth/cookie",
    )
    app.register_blueprint(auth_bp)

    @app.route("/", methods=["GET"])
    def index():
        return send_from_directory(app.static_folder, "index.html", mimetype="text/html")

    register_error_handlers(app)

    @app.after_request
    def log_request(response):
        logger.info(f"{request.method} {request.path} -> {response.status_code}")
        return response

    return app


def register_error_handlers(app):
    @app.errorhandler(ValidationError)
    def handle_validation_error(e):
        return jsonify(error(400, e.message)), 400

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        if e.code >= 500:
            cause = getattr(e, "original_exception", None) or e
            logger.error(f"Error handling {request.method} {request.path}", exc_info=cause)
        response = jsonify({"statusCode": e.code, "error": e.name, "message": e.description})
        response.status_code = e.code
        for name, value in e.get_headers():
            if name.lower() != "content-type":
                response.headers[name] = value
        return response
