"""Query execution and result formatting."""

from university_data.execution.executor import CatalogExecutor
from university_data.execution.result_formatter import ResultFormatter

__all__ = ["CatalogExecutor", "ResultFormatter"]
