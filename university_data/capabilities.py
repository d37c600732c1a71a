"""
Static capability description served at ``/schema``.

Clients read this document to discover the endpoints and their parameters.
"""

from typing import Any, Dict

SERVICE_NAME = "UniversityDataMCP"
SERVICE_VERSION = "1.0.0"

SERVICE_INFO: Dict[str, Any] = {
    "name": "University Data MCP API",
    "description": "A Machine Controllable Program (MCP) for querying university data",
    "version": SERVICE_VERSION,
    "documentation": "/schema",
    "status": "operational",
}


def _param(type_: str, description: str, required: bool = False) -> Dict[str, Any]:
    return {"type": type_, "description": description, "required": required}


def build_capability_document() -> Dict[str, Any]:
    """Return the endpoint catalogue as a JSON-serializable dict."""
    return {
        "name": SERVICE_NAME,
        "description": "An MCP for querying university data from the OpenDataSoft API",
        "version": SERVICE_VERSION,
        "endpoints": [
            {
                "path": "/search",
                "method": "POST",
                "description": "Search for universities based on criteria",
                "parameters": {
                    "query": _param("string", "Full-text search query"),
                    "state": _param("string", "Filter by state (e.g., 'CA', 'NY')"),
                    "city": _param("string", "Filter by city name"),
                    "limit": _param(
                        "number",
                        "Maximum number of results to return (default: 10, max: 100)",
                    ),
                    "offset": _param("number", "Number of results to skip (for pagination)"),
                },
                "returns": {
                    "type": "object",
                    "description": "Search results including university records",
                },
            },
            {
                "path": "/getFields",
                "method": "GET",
                "description": "Get all available fields in the university dataset",
                "parameters": {},
                "returns": {
                    "type": "array",
                    "description": "List of available fields and their descriptions",
                },
            },
            {
                "path": "/statistics",
                "method": "POST",
                "description": "Get statistical information about universities",
                "parameters": {
                    "field": _param(
                        "string",
                        "Field to analyze (e.g., 'objectid', 'population')",
                        required=True,
                    ),
                    "aggregation": _param(
                        "string",
                        "Type of aggregation (count, sum, avg, min, max)",
                        required=True,
                    ),
                    "groupBy": _param("string", "Field to group by (e.g., 'state', 'city')"),
                    "filter": _param("object", "Filter conditions to apply"),
                },
                "returns": {"type": "object", "description": "Statistical results"},
            },
            {
                "path": "/getUniversity",
                "method": "GET",
                "description": "Get details for a specific university by ID",
                "parameters": {
                    "id": _param("string", "University record ID (objectid)", required=True),
                },
                "returns": {
                    "type": "object",
                    "description": "Detailed university information",
                },
            },
            {
                "path": "/getUniversityByName",
                "method": "GET",
                "description": "Get details for a specific university by name",
                "parameters": {
                    "name": _param("string", "University name", required=True),
                },
                "returns": {
                    "type": "object",
                    "description": "Detailed university information",
                },
            },
        ],
    }
