from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from app.core.config import get_settings
from app.core.logging import get_logger
from app.schemas.validation import (
    FailureResponse,
    ServiceAreaListResponse,
    ServiceAreaModel,
    ValidateAddressResponse,
    ValidationResultModel,
)
from app.services.address_service import (
    AddressValidationService,
    get_address_validation_service,
)


router = APIRouter()

_logger = get_logger(__name__)

INVALID_ADDRESS_MESSAGE = "Alamat tidak valid"
VALIDATION_FAILED_MESSAGE = "Gagal memvalidasi alamat"


class AddressRequestError(Exception):
    """The request body does not carry a usable address."""

    def __init__(self, message: str = INVALID_ADDRESS_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


def get_service() -> AddressValidationService:
    settings = get_settings()
    return get_address_validation_service(settings.area_table_path)


def failure_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=FailureResponse(message=message).model_dump(),
    )


def _extract_address(payload: Any) -> str:
    if not isinstance(payload, dict):
        raise AddressRequestError()
    address = payload.get("address")
    if not isinstance(address, str) or not address:
        raise AddressRequestError()
    return address


@router.post(
    "/validate-address",
    response_model=ValidateAddressResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": FailureResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": FailureResponse},
    },
)
async def validate_address(
    request: Request,
    service: AddressValidationService = Depends(get_service),
) -> ValidateAddressResponse | JSONResponse:
    try:
        payload = await request.json()
        address = _extract_address(payload)
        result = service.validate(address)
        return ValidateAddressResponse(data=ValidationResultModel.from_result(result))
    except AddressRequestError:
        raise
    except Exception:
        _logger.exception("Address validation failed")
        return failure_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, VALIDATION_FAILED_MESSAGE
        )


@router.get("/service-areas", response_model=ServiceAreaListResponse)
async def list_service_areas(
    service: AddressValidationService = Depends(get_service),
) -> ServiceAreaListResponse:
    areas = [ServiceAreaModel.from_area(area) for area in service.service_areas()]
    return ServiceAreaListResponse(data=areas)
