"""Request body validation for Flask endpoints.

The @validate_request decorator turns a JSON request body into the Pydantic
model named by the view's parameter annotation:

    @bp.post("/events")
    @validate_request
    def create_event(data: EventCreate):
        ...

Path parameters (present in request.view_args) pass through unchanged.
Date and date-time fields are decoded against the current client time zone,
which is threaded into validation through the Pydantic context.
"""

import inspect
import logging
from functools import wraps

from flask import request
from pydantic import BaseModel, ValidationError as PydanticValidationError

from ..exceptions import ValidationError
from ..schema.types import TIME_ZONE_CONTEXT_KEY
from ..timezones import registry

logger = logging.getLogger(__name__)


def _format_errors(error: PydanticValidationError) -> list[dict]:
    """Flatten Pydantic errors into JSON-safe field/message/expected_type dicts."""
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "expected_type": err["type"],
        }
        for err in error.errors()
    ]


def validate_request(f):
    """
    Decorator that validates the JSON request body against a Pydantic model.

    The first parameter not supplied by the URL rule is treated as the body
    parameter and must be annotated with a Pydantic BaseModel subclass.

    Raises:
        TypeError: At decoration time if the view has no parameters or its
            first parameter is unannotated; at request time if the body
            parameter is not annotated with a BaseModel subclass
        ValidationError: If the body is missing or fails model validation
    """
    params = list(inspect.signature(f).parameters.values())
    if not params:
        raise TypeError(f"{f.__name__}() has no parameters to validate")
    if params[0].annotation is inspect.Parameter.empty:
        raise TypeError(
            f"First parameter '{params[0].name}' of {f.__name__}() lacks a type annotation"
        )

    @wraps(f)
    def wrapper(*args, **kwargs):
        view_args = request.view_args or {}

        for param in params:
            if param.name in view_args or param.name in kwargs:
                continue

            model = param.annotation
            if not (inspect.isclass(model) and issubclass(model, BaseModel)):
                raise TypeError(
                    f"Body parameter '{param.name}' of {f.__name__}() must be annotated "
                    f"with a Pydantic BaseModel subclass"
                )

            body = request.get_json(silent=True)
            if body is None:
                raise ValidationError(
                    "Request body must be a JSON document",
                    {"model": model.__name__}
                )

            try:
                kwargs[param.name] = model.model_validate(
                    body,
                    context={TIME_ZONE_CONTEXT_KEY: registry.current_client_zone()}
                )
            except PydanticValidationError as e:
                logger.info(f"Rejected {model.__name__} payload: {e.error_count()} error(s)")
                raise ValidationError(
                    "Invalid request data",
                    {
                        "model": model.__name__,
                        "received": body,
                        "errors": _format_errors(e),
                    }
                )
            break

        return f(*args, **kwargs)

    return wrapper
