"""
FastAPI REST API for the University Data service.

Re-exposes the public colleges and universities catalog through a handful
of endpoints that return a uniform {success, data, metadata} envelope.
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import APIRouter, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from university_data import UniversityDataService
from university_data.capabilities import SERVICE_INFO, build_capability_document
from university_data.core import CatalogConfig, CatalogError, SearchRequest, StatisticsRequest
from university_data.execution import ResultFormatter
from university_data.logging_config import configure_logging

load_dotenv()

logger = logging.getLogger(__name__)

router = APIRouter()


def get_service(request: Request) -> UniversityDataService:
    """Service instance created in the application lifespan."""
    return request.app.state.service


@router.get("/")
async def root():
    """Basic information about the API."""
    return SERVICE_INFO


@router.get("/schema")
async def schema():
    """Describe the capabilities of this API."""
    return build_capability_document()


@router.post("/search")
async def search(http_request: Request, request: Optional[SearchRequest] = None):
    """Search for universities by free text, state and city."""
    return await get_service(http_request).search(request or SearchRequest())


@router.get("/getUniversity")
async def get_university(
    http_request: Request,
    id: Optional[str] = Query(None, description="University record ID"),
):
    """Fetch details for a specific university by ID."""
    return await get_service(http_request).get_university(id)


@router.get("/getUniversityByName")
async def get_university_by_name(
    http_request: Request,
    name: Optional[str] = Query(None, description="University name"),
):
    """Fetch details for a university by name."""
    return await get_service(http_request).get_university_by_name(name)


@router.get("/getFields")
async def get_fields(http_request: Request):
    """List the fields available in the dataset."""
    return await get_service(http_request).get_fields()


@router.post("/statistics")
async def statistics(http_request: Request, request: Optional[StatisticsRequest] = None):
    """Aggregated statistics about universities."""
    return await get_service(http_request).get_statistics(request or StatisticsRequest())


def register_error_handlers(app: FastAPI) -> None:
    """
    Render every failure as an error envelope.

    Args:
        app: The FastAPI application instance
    """

    @app.exception_handler(CatalogError)
    async def handle_catalog_error(_request: Request, exc: CatalogError) -> JSONResponse:
        return JSONResponse(status_code=exc.status, content=ResultFormatter.from_error(exc))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Malformed bodies and parameters are validation errors (400)."""
        errors = exc.errors()
        if errors:
            location = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
            message = f"Invalid value for '{location}': {errors[0].get('msg')}"
        else:
            message = "Invalid request"
        logger.warning("Rejected request: %s", message)
        return JSONResponse(status_code=400, content=ResultFormatter.failure(message, 400))

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return JSONResponse(
            status_code=500,
            content=ResultFormatter.failure("Internal server error", 500),
        )


def create_app(service: Optional[UniversityDataService] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        service: Pre-built service; by default one is created from the
            environment when the application starts

    Returns:
        Configured FastAPI application
    """
    configure_logging(os.getenv("LOG_LEVEL", "INFO"))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.service = service or UniversityDataService.from_config(
            CatalogConfig.from_env()
        )
        yield
        await app.state.service.aclose()

    app = FastAPI(
        title="University Data API",
        description="Query the US colleges and universities open-data catalog",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", "3000"))
    host = os.getenv("HOST", "0.0.0.0")

    logger.info("University Data server running on port %s", port)
    uvicorn.run(app, host=host, port=port)
