"""Boundary checks shared by the resource clients.

Input checks raise :class:`thebrain.exceptions.ValidationError` before any
request is built. Response checks raise
:class:`thebrain.exceptions.ResponseValidationError` after a 2xx response
whose body does not match its schema.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from functools import lru_cache
from typing import Any, TypeVar
from urllib.parse import unquote

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ResponseValidationError, UnsafePathSegmentError, ValidationError
from .models import UUID_PATTERN, JsonPatchDocument, JsonPatchOperation

_M = TypeVar("_M", bound=BaseModel)

_UUID_RE = re.compile(UUID_PATTERN)
_UNSAFE_SEQUENCES = ("../", "..\\", "/", "\\")

EMPTY_PATCH_MESSAGE = "Operations array is required and cannot be empty"


def format_errors(exc: PydanticValidationError) -> list[str]:
    """One ``location: message`` line per failing field."""
    lines = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ())) or "<root>"
        lines.append(f"{loc}: {err.get('msg', 'invalid')}")
    return lines


def ensure_uuid(value: Any, field: str = "id") -> str:
    """Return ``value`` if it is a UUID string, else raise ValidationError."""
    if not isinstance(value, str) or not _UUID_RE.match(value):
        raise ValidationError(f"{field} must be a UUID, got {value!r}")
    return value


def ensure_safe_path_segment(value: Any, field: str) -> str:
    """Reject path segments that could escape their URL position.

    The value is checked as given and after each round of percent-decoding,
    so ``..%2F`` and ``%252F`` are caught as well as ``../`` and ``/``.
    """
    if not isinstance(value, str) or not value:
        raise UnsafePathSegmentError(f"Invalid path segment: {field} must be a non-empty string")

    forms = [value]
    while True:
        decoded = unquote(forms[-1])
        if decoded == forms[-1]:
            break
        forms.append(decoded)

    for form in forms:
        if form in (".", "..") or any(seq in form for seq in _UNSAFE_SEQUENCES):
            raise UnsafePathSegmentError(f"Invalid path segment: {field}={value!r}")
    return value


def validate_input(model: type[_M], data: Any) -> _M:
    """Coerce caller input into ``model``, raising ValidationError."""
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        errors = format_errors(e)
        raise ValidationError(f"Invalid {model.__name__}: " + "; ".join(errors), errors=errors) from e


def normalize_patch_operations(document: Any) -> list[JsonPatchOperation]:
    """Return the canonical operation list of a patch document.

    Accepts a list of operations (models or dicts) or the wrapper form
    (``JsonPatchDocument`` or a dict with ``operations``). An empty or
    missing list is rejected.
    """
    if isinstance(document, JsonPatchDocument):
        operations = document.operations
    elif isinstance(document, Mapping):
        operations = document.get("operations")
    elif isinstance(document, Sequence) and not isinstance(document, (str, bytes)):
        operations = document
    else:
        operations = None

    if not operations:
        raise ValidationError(EMPTY_PATCH_MESSAGE)
    return [validate_input(JsonPatchOperation, op) for op in operations]


@lru_cache(maxsize=None)
def _adapter(schema: Any) -> TypeAdapter:
    return TypeAdapter(schema)


def parse_response(schema: Any, payload: Any) -> Any:
    """Validate a decoded response body against ``schema``.

    ``schema`` is a model class or a typing form such as ``list[Thought]``.
    """
    try:
        return _adapter(schema).validate_python(payload)
    except PydanticValidationError as e:
        raise ResponseValidationError(errors=format_errors(e), payload=payload) from e


__all__ = [
    "EMPTY_PATCH_MESSAGE",
    "format_errors",
    "ensure_uuid",
    "ensure_safe_path_segment",
    "validate_input",
    "normalize_patch_operations",
    "parse_response",
]
