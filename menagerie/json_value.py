"""A tree of JSON values, built from ordinary Python data."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any


class JsonKind(Enum):
    """The six kinds of JSON value."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


@dataclass
class Json:
    """A JSON value: its kind and its payload.

    Numbers are held as floats, arrays as lists of Json and objects as
    dicts mapping strings to Json.
    """

    kind: JsonKind
    value: Any = None

    @classmethod
    def from_value(cls, value: Any) -> "Json":
        """Convert a bool, string or real number into a Json value."""
        if isinstance(value, Json):
            return value
        if isinstance(value, bool):
            return cls(JsonKind.BOOLEAN, value)
        if isinstance(value, str):
            return cls(JsonKind.STRING, value)
        if isinstance(value, numbers.Real):
            return cls(JsonKind.NUMBER, float(value))
        raise TypeError(f"cannot convert {type(value).__name__} to Json")


def json_value(template: Any) -> Json:
    """Build a Json tree from nested Python data.

    ``None`` becomes null, lists and tuples become arrays, dicts become
    objects whose keys are converted with ``str``, and anything else goes
    through ``Json.from_value``.
    """
    if template is None:
        return Json(JsonKind.NULL)
    if isinstance(template, Json):
        return template
    if isinstance(template, (list, tuple)):
        return Json(JsonKind.ARRAY, [json_value(element) for element in template])
    if isinstance(template, dict):
        return Json(
            JsonKind.OBJECT,
            {str(key): json_value(value) for key, value in template.items()},
        )
    return Json.from_value(template)