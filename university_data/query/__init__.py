"""Query building and translation components."""

from university_data.query.filter_builder import FilterBuilder
from university_data.query.translator import QueryTranslator

__all__ = ["FilterBuilder", "QueryTranslator"]
