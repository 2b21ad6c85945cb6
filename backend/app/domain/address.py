from __future__ import annotations

from dataclasses import dataclass

from app.core.logging import get_logger
from app.domain.areas import (
    CIMANGIS_NAME,
    DEFAULT_AREA_TABLE,
    LANDMARK_NAME,
    PEKAPURAN_NAME,
    AreaVariantTable,
)
from app.domain.text import normalize_address


_logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ServiceabilityResult:
    is_valid: bool
    message: str
    confidence: int
    detected_area: str | None = None
    suggestions: tuple[str, ...] | None = None


_CITY_PHRASE = "kota depok"
_MIN_ADDRESS_LENGTH = 10

_SERVED_AREAS_HINT = (
    "Area yang dilayani: Cimangis, Pekapuran, SMK Taruna Bhakti",
    "Pastikan alamat Anda berada di salah satu area tersebut",
)
_OUTSIDE_AREA_HINT = (
    "Kami hanya melayani: Cimangis, Pekapuran, dan area TB di Depok",
    "Hubungi kami untuk informasi pengiriman ke area lain",
)
_TOO_SHORT_HINT = (
    "Contoh: Jl. Raya Cimangis No. 123, RT 01/RW 05, Cimangis, Depok",
    "Sertakan nama area: Cimangis, Pekapuran, atau TB",
)
_UNCLEAR_HINT = (
    "Sertakan nama area yang jelas: Cimangis, Pekapuran, atau TB",
    "Contoh: Jl. Raya Cimangis No. 123, Cimangis, Depok",
    "Atau: SMK Taruna Bhakti, Depok",
)


def classify_address(
    address: str,
    table: AreaVariantTable = DEFAULT_AREA_TABLE,
) -> ServiceabilityResult:
    """Decide whether a free-form address lies in the delivery service area.

    Rules are checked in order and the first one that fires wins. The
    landmark beats everything, a named area beats the Depok qualifier, and
    the outside-area blacklist is only consulted when neither produced a
    verdict. Confidence is a fixed tier per rule.
    """

    normalized = normalize_address(address)

    if table.matches("taruna_bhakti", normalized):
        return _verdict(
            "landmark",
            ServiceabilityResult(
                True,
                f"✅ Alamat valid! Area TB/{LANDMARK_NAME} dapat dilayani.",
                100,
                detected_area=LANDMARK_NAME,
            ),
        )

    found_cimangis = table.matches("cimangis", normalized)
    found_pekapuran = table.matches("pekapuran", normalized)
    found_depok = table.matches("depok", normalized) or _CITY_PHRASE in normalized

    if found_cimangis or found_pekapuran:
        area = CIMANGIS_NAME if found_cimangis else PEKAPURAN_NAME
        if found_depok:
            return _verdict(
                "area_in_depok",
                ServiceabilityResult(
                    True,
                    f"✅ Alamat valid! Area {area}, Depok dapat dilayani.",
                    95,
                    detected_area=f"{area}, Depok",
                ),
            )
        return _verdict(
            "area_only",
            ServiceabilityResult(
                True,
                f"✅ Alamat valid! Area {area} dapat dilayani.",
                85,
                detected_area=area,
                suggestions=("Pastikan alamat berada di wilayah Depok",),
            ),
        )

    if found_depok:
        return _verdict(
            "depok_unserved",
            ServiceabilityResult(
                False,
                "❌ Maaf, kami hanya melayani area Cimangis, Pekapuran, dan sekitar TB di Depok.",
                90,
                suggestions=_SERVED_AREAS_HINT,
            ),
        )

    outside = table.first_outside_area(normalized)
    if outside is not None:
        # Only the first character is upper-cased: "bojong gede" -> "Bojong gede"
        label = outside[:1].upper() + outside[1:]
        return _verdict(
            "outside_area",
            ServiceabilityResult(
                False,
                f"❌ Maaf, area {label} belum dapat kami layani.",
                95,
                suggestions=_OUTSIDE_AREA_HINT,
            ),
        )

    if _utf16_length(normalized) < _MIN_ADDRESS_LENGTH:
        return _verdict(
            "too_short",
            ServiceabilityResult(
                False,
                "⚠️ Alamat terlalu singkat. Mohon lengkapi dengan nama jalan, RT/RW, dan kelurahan.",
                50,
                suggestions=_TOO_SHORT_HINT,
            ),
        )

    return _verdict(
        "unclear",
        ServiceabilityResult(
            False,
            "⚠️ Alamat tidak jelas. Pastikan alamat berada di area Cimangis, Pekapuran, atau TB Depok.",
            60,
            suggestions=_UNCLEAR_HINT,
        ),
    )


def _verdict(rule: str, result: ServiceabilityResult) -> ServiceabilityResult:
    _logger.debug(
        "Address classified",
        rule=rule,
        is_valid=result.is_valid,
        confidence=result.confidence,
        detected_area=result.detected_area,
    )
    return result


def _utf16_length(text: str) -> int:
    # Counted in UTF-16 code units, as the storefront checks length in the browser
    return len(text.encode("utf-16-le")) // 2
