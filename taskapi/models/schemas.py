"""
Request body schemas for the task and login routes
"""

from typing import Optional, Union

import pydantic
from pydantic import BaseModel
from flask import request

from ..errors import ValidationError


class AddTaskBody(BaseModel):
    title: str
    completed: Optional[bool] = None


class UpdateTaskBody(BaseModel):
    id: Union[int, str]
    title: Optional[str] = None
    completed: Optional[bool] = None


class LoginBody(BaseModel):
    email: str
    password: str


def _describe(err):
    field = str(err["loc"][0])
    if err["type"] == "missing":
        return f"body must have required property '{field}'"
    return f"body/{field} {err['msg'][0].lower()}{err['msg'][1:]}"


def parse_body(model):
    """Validate the JSON body of the current request against `model`."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("body must be object")
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        raise ValidationError(_describe(e.errors()[0])) from e
