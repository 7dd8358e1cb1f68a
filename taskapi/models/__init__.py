from .task import Task
from .schemas import AddTaskBody, UpdateTaskBody, LoginBody, parse_body

__all__ = ["Task", "AddTaskBody", "UpdateTaskBody", "LoginBody", "parse_body"]
