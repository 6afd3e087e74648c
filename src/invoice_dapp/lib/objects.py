"""
JSON serialization helpers for outbound chain messages.

Browser JSON encoding turns non-finite numbers into ``null``; the helpers
here apply the same rule so an unparsable due date reaches the relay the
way a browser wallet would send it.
"""

import json
import math
from dataclasses import asdict, is_dataclass
from typing import Any


def to_jsonable(obj: Any) -> Any:
    """
    Return a copy of obj that json.dumps accepts without NaN/Infinity.

    Dataclasses are converted to dictionaries; tuples become lists; floats
    that are NaN or infinite become None.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        obj = asdict(obj)
    if isinstance(obj, dict):
        return {str(key): to_jsonable(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_jsonable(value) for value in obj]
    if isinstance(obj, float) and not math.isfinite(obj):
        return None
    return obj


def to_json(obj: Any, indent: int | None = None) -> str:
    """
    Serialize an object to a strict JSON string.

    Args:
        obj: Object to serialize.
        indent: Optional indentation for pretty printing.

    Returns:
        JSON string representation.
    """
    return json.dumps(to_jsonable(obj), indent=indent, allow_nan=False, default=str)
