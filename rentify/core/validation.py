"""Input validation helpers shared by services and exception handlers."""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from rentify.core.exceptions import ValidationError


def format_validation_errors(errors: Sequence[Mapping[str, Any]]) -> str:
    """Render pydantic error dicts as a single "field: message" string.

    The "body" location prefix added by FastAPI is dropped.
    """
    messages = []
    for error in errors:
        field = ".".join(str(loc) for loc in error["loc"] if loc != "body")
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
    return "; ".join(messages)


def validate_input[S: BaseModel](schema: type[S], data: S | Mapping[str, Any]) -> S:
    """Coerce raw input into ``schema``.

    Instances of the schema pass through untouched. Anything else is
    validated, and pydantic failures are re-raised as the application's
    ValidationError.
    """
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(format_validation_errors(exc.errors())) from exc
