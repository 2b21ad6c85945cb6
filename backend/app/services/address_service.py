from __future__ import annotations

from pathlib import Path
from typing import Callable

from app.core.logging import get_logger
from app.domain.address import ServiceabilityResult, classify_address
from app.domain.areas import AreaVariantTable, ServiceArea, load_area_table


ClassifierCallable = Callable[[str, AreaVariantTable], ServiceabilityResult]


_logger = get_logger(__name__)


class AddressValidationService:
    """Check delivery addresses against the configured service areas."""

    def __init__(
        self,
        table: AreaVariantTable,
        *,
        classifier: ClassifierCallable = classify_address,
    ) -> None:
        self._table = table
        self._classifier = classifier

    @property
    def table(self) -> AreaVariantTable:
        return self._table

    def validate(self, address: str) -> ServiceabilityResult:
        result = self._classifier(address, self._table)
        _logger.info(
            "Address validated",
            is_valid=result.is_valid,
            confidence=result.confidence,
            detected_area=result.detected_area,
        )
        return result

    def service_areas(self) -> list[ServiceArea]:
        return self._table.service_areas()


_validation_service: AddressValidationService | None = None
_validation_table_path: Path | None = None


def get_address_validation_service(
    area_table_path: Path | None,
) -> AddressValidationService:
    global _validation_service, _validation_table_path
    if _validation_service is None or _validation_table_path != area_table_path:
        table = load_area_table(area_table_path)
        _validation_service = AddressValidationService(table)
        _validation_table_path = area_table_path
    return _validation_service
