"""Key Parsing: shared coercion and error mapping for payload schemas.

Invariants:
    - Integer keys become their decimal string; bools are never treated as ints
    - parse_payload raises PayloadValidationError naming the first failing field
    - Payloads holding NaN or Infinity are rejected before reaching storage:
      responses are strict JSON, so such a row could never be read back
"""

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from app.core.errors import PayloadValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def coerce_key(value: Any) -> Any:
    """Accept integer identifiers by converting them to str."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def ensure_strict_json(payload: Any) -> None:
    """Raise PayloadValidationError if the payload has non-finite numbers."""
    try:
        json.dumps(payload, allow_nan=False)
    except ValueError as e:
        raise PayloadValidationError(
            "Invalid body: NaN and Infinity are not valid JSON", "body",
        ) from e


def parse_payload(model: type[ModelT], payload: Any) -> ModelT:
    """Validate a raw request body, mapping pydantic errors to the taxonomy."""
    ensure_strict_json(payload)
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(loc) for loc in first["loc"]) or "body"
        raise PayloadValidationError(
            f"Invalid {field}: {first['msg']}", field,
        ) from e
