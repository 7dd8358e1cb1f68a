import logging

from flask import Blueprint, jsonify, session

from ..models.schemas import LoginBody, parse_body

logger = logging.getLogger(__name__)

# Every email is accepted with this one shared password.
ACCEPTED_PASSWORD = "m294"

PLAIN_TEXT = {"Content-Type": "text/plain; charset=utf-8"}

auth_bp = Blueprint("auth", __name__, url_prefix="/auth/cookie")


@auth_bp.route("/status", methods=["GET"])
def status():
    email = session.get("email")
    if not email:
        return "", 401
    return jsonify({"email": email})


@auth_bp.route("/login", methods=["POST"])
def login():
    body = parse_body(LoginBody)
    if body.password != ACCEPTED_PASSWORD:
        logger.info(f"Failed login for {body.email}")
        return jsonify({
            "statusCode": 400,
            "message": f"invalid credentials, use «{ACCEPTED_PASSWORD}» as password",
        }), 400

    session["email"] = body.email
    logger.info(f"Logged in {body.email}")
    return "ok", 200, PLAIN_TEXT


@auth_bp.route("/logout", methods=["POST"])
def logout():
    session.destroy()
    return "ok", 200, PLAIN_TEXT
