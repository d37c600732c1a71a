"""
University Data - REST translation layer over the public colleges catalog.

Main entry point for creating the service that validates requests, builds
catalog queries and shapes upstream responses.
"""

from university_data.orchestrator import UniversityDataService

__all__ = ["UniversityDataService"]
