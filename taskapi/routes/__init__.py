from .tasks import create_tasks_blueprint, parse_id
from .auth import auth_bp

__all__ = ["create_tasks_blueprint", "parse_id", "auth_bp"]
