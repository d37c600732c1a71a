"""
Build catalog filter expressions.

Produces ``where`` clauses in the catalog's restricted filter language:
``field = literal`` equality clauses joined by ``AND``.
"""

import re
from typing import Any, Dict, List, Optional

from university_data.core.errors import CatalogValidationError


IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_.]*$")


class FilterBuilder:
    """
    Accumulates equality clauses and renders them as one conjunction.

    Field names are checked against an identifier pattern and literals are
    quoted with embedded quotes escaped, so user input cannot change the
    structure of the expression.
    """

    def __init__(self):
        self._clauses: List[str] = []

    def equals(self, field: str, value: Any) -> "FilterBuilder":
        """
        Add a ``field = value`` clause.

        Args:
            field: Dataset field name
            value: String values are quoted, numbers and booleans are bare

        Returns:
            The builder, for chaining
        """
        self._clauses.append(f"{validate_identifier(field)} = {format_literal(value, field)}")
        return self

    def extend(self, conditions: Dict[str, Any]) -> "FilterBuilder":
        """Add one equality clause per mapping entry, in mapping order."""
        for field, value in conditions.items():
            self.equals(field, value)
        return self

    def build(self) -> Optional[str]:
        """Render the conjunction, or None when no clause was added."""
        if not self._clauses:
            return None
        return " AND ".join(self._clauses)


def validate_identifier(name: str) -> str:
    """Return ``name`` unchanged if it is a plain field identifier."""
    if not isinstance(name, str) or not IDENTIFIER_PATTERN.match(name):
        raise CatalogValidationError(f"Invalid field name: {name!r}")
    return name


def quote_literal(value: str) -> str:
    """Quote a string literal, escaping backslashes and single quotes."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def format_literal(value: Any, field: str = "") -> str:
    """Render a scalar as a filter-language literal."""
    if isinstance(value, str):
        return quote_literal(value)
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if value is None:
        return "null"
    raise CatalogValidationError(f"Unsupported filter value for '{field}'")
