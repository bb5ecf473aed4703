"""
Request body validation.

Create endpoints do not let FastAPI parse their bodies.  They depend on
``validated_body(Schema)``, which reads the JSON body and checks it in
two steps: every required field must be present and not null
(``has_required_fields``), then every field must have the right type
(pydantic strict validation of ``Schema``).  Any failure raises
:class:`InvalidInputError` with the schema's ``invalid_input_message``,
which the app renders as HTTP 400.
"""

import logging
from typing import Any, Callable, Iterable, List, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from .errors import InvalidInputError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def has_required_fields(body: Any, required_fields: Iterable[str]) -> bool:
    """Return ``True`` if ``body`` is a mapping holding a non-null value for every field."""
    if not isinstance(body, dict):
        return False
    return all(body.get(field) is not None for field in required_fields)


def required_fields(schema: Type[BaseModel]) -> List[str]:
    """JSON names of the fields ``schema`` requires."""
    return [
        field.alias or name
        for name, field in schema.model_fields.items()
        if field.is_required()
    ]


def parse_payload(schema: Type[SchemaT], body: Any) -> SchemaT:
    """Check ``body`` against ``schema`` and return the parsed payload."""
    if not has_required_fields(body, required_fields(schema)):
        raise InvalidInputError(schema.invalid_input_message)
    try:
        return schema.model_validate(body)
    except ValidationError as exc:
        logger.debug("%s failed validation: %s", schema.__name__, exc)
        raise InvalidInputError(schema.invalid_input_message) from exc


def validated_body(schema: Type[SchemaT]) -> Callable:
    """Build a FastAPI dependency that yields ``schema`` parsed from the request body."""

    async def dependency(request: Request) -> SchemaT:
        try:
            body = await request.json()
        except ValueError as exc:
            # Empty or malformed JSON
            raise InvalidInputError(schema.invalid_input_message) from exc
        return parse_payload(schema, body)

    return dependency
