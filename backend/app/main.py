from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.routes import router
from app.api.v1.addresses import AddressRequestError, failure_response
from app.core.config import get_settings
from app.core.logging import configure_logging, get_logger
from app.services.address_service import get_address_validation_service


settings = get_settings()
configure_logging(settings.debug)

_logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    # Fail at startup rather than on the first request if the table is broken
    service = get_address_validation_service(settings.area_table_path)
    _logger.info(
        "Service areas ready",
        areas=[area.name for area in service.service_areas()],
        area_table_path=str(settings.area_table_path) if settings.area_table_path else None,
    )
    yield


app = FastAPI(title="Kantin API", version="0.1.0", debug=settings.debug, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.exception_handler(AddressRequestError)
async def address_request_error_handler(
    _request: Request, exc: AddressRequestError
) -> JSONResponse:
    _logger.info("Rejected address request", reason=exc.message)
    return failure_response(status.HTTP_400_BAD_REQUEST, exc.message)


@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Return basic service health."""

    return {"status": "ok"}
