from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from app.domain.address import ServiceabilityResult
from app.domain.areas import ServiceArea


class ValidationResultModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_valid: bool = Field(..., alias="isValid")
    message: str
    confidence: int = Field(..., ge=0, le=100)
    detected_area: str | None = Field(default=None, alias="detectedArea")
    suggestions: list[str] | None = None

    @classmethod
    def from_result(cls, result: ServiceabilityResult) -> ValidationResultModel:
        return cls(
            is_valid=result.is_valid,
            message=result.message,
            confidence=result.confidence,
            detected_area=result.detected_area,
            suggestions=list(result.suggestions) if result.suggestions is not None else None,
        )


class ValidateAddressResponse(BaseModel):
    success: Literal[True] = True
    data: ValidationResultModel


class FailureResponse(BaseModel):
    success: Literal[False] = False
    message: str


class ServiceAreaModel(BaseModel):
    name: str
    variants: list[str] = Field(default_factory=list)

    @classmethod
    def from_area(cls, area: ServiceArea) -> ServiceAreaModel:
        return cls(name=area.name, variants=list(area.variants))


class ServiceAreaListResponse(BaseModel):
    success: Literal[True] = True
    data: list[ServiceAreaModel] = Field(default_factory=list)
