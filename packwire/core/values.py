from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError

from packwire.core.errors import EncodeError


_INFER = TypeAdapter(Any)


@lru_cache(maxsize=256)
def adapter_for(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def to_value(raw: Any, target: Any = Any) -> Any:
    """
    Validate decoded plain data against `target`.
    Raises pydantic.ValidationError on a shape mismatch.
    """
    if target is Any:
        return raw
    return adapter_for(target).validate_python(raw)


def to_plain(value: Any) -> Any:
    """
    Convert a typed value into plain data keyed by field name.

    Models and dataclasses become dicts, nested values are converted
    recursively, anything else is left for the serializer to accept or
    refuse.
    """
    try:
        return _INFER.dump_python(value, mode="python")
    except PydanticSerializationError as exc:
        raise EncodeError(str(exc)) from exc
