"""
Type mapping utilities for guessing field types from sample values.
"""

import math
from typing import Any, Dict


class TypeMapper:
    """Maps sampled JSON values to normalized type names."""

    # Field names containing any of these are treated as dates
    DATE_NAME_MARKERS = ("date", "time")

    # JSON-decoded Python types to normalized names
    RUNTIME_TYPE_MAP: Dict[type, str] = {
        str: "string",
        bool: "boolean",
        int: "number",
        float: "number",
        dict: "object",
        list: "array",
        type(None): "null",
    }

    @classmethod
    def infer_type(cls, field_name: str, value: Any) -> str:
        """
        Guess the normalized type of a field from its name and one value.

        Checks run in priority order: a date-like name wins over a numeric
        value, which wins over the value's runtime type.

        Args:
            field_name: Field name as it appears in the record
            value: Sample value for the field

        Returns:
            Normalized type string (date, number, string, boolean, object, array, null)
        """
        if any(marker in field_name for marker in cls.DATE_NAME_MARKERS):
            return "date"
        if cls.is_numeric(value):
            return "number"
        return cls.runtime_type(value)

    @classmethod
    def runtime_type(cls, value: Any) -> str:
        """Normalized name of the value's own type."""
        return cls.RUNTIME_TYPE_MAP.get(type(value), "unknown")

    @staticmethod
    def is_numeric(value: Any) -> bool:
        """True for numbers and for strings that parse as a number."""
        if isinstance(value, bool):
            return False
        if isinstance(value, (int, float)):
            return True
        if not isinstance(value, str) or not value.strip():
            return False
        try:
            parsed = float(value)
        except ValueError:
            return False
        return not math.isnan(parsed)
