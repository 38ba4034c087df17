import logging
from collections.abc import Mapping
from typing import Any, Type, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from .exceptions import BindingError, InvalidArgumentsError

logger = logging.getLogger("abuse-core")

ModelT = TypeVar("ModelT", bound=BaseModel)


def bind_arguments(arguments: Any, model: Type[ModelT]) -> ModelT:
    """Bind an untyped tool argument mapping onto a request model.

    Unknown keys are dropped and absent fields stay unset. Only field types
    are checked; required fields and value ranges are left to the API.
    """
    if not isinstance(arguments, Mapping):
        raise InvalidArgumentsError("Invalid arguments object")
    try:
        return model.model_validate(dict(arguments))
    except ValidationError as e:
        logger.debug(f"Binding {model.__name__} failed for {dict(arguments)}: {e}")
        raise BindingError(f"Failed to convert arguments to request type: {e}") from e


def format_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_query_string(query: BaseModel) -> str:
    """Render the explicitly set fields of ``query`` in declaration order."""
    params = []
    for name in type(query).model_fields:
        if name not in query.model_fields_set:
            continue
        value = getattr(query, name)
        if value is None:
            continue
        params.append(f"{name}={quote(format_query_value(value), safe='')}")
    return "&".join(params)
