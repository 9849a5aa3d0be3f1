# taxengine/domain/services/gstin_pan_validation.py

from __future__ import annotations

import logging
import re

from taxengine.config.settings import settings
from taxengine.domain.models.results import ErrorKind, GstinValidation, PanValidation
from taxengine.domain.services.jurisdiction import is_known_state_code

logger = logging.getLogger("gstin_pan_validation")

PAN_REGEX = re.compile(r"^[A-Z]{5}[0-9]{4}[A-Z]$")
# state code, PAN, entity number, 'Z', check character
GSTIN_REGEX = re.compile(r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z][0-9A-Z]Z[0-9A-Z]$")

_CHECKSUM_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def gstin_check_character(gstin_prefix: str) -> str:
    """Check character for the first 14 characters of a GSTIN.

    Base-36 Luhn variant: odd positions weigh 2, each product is folded
    as ``p // 36 + p % 36``.
    """
    total = 0
    for index, char in enumerate(gstin_prefix[:14]):
        product = _CHECKSUM_ALPHABET.index(char) * (2 if index % 2 else 1)
        total += product // 36 + product % 36
    return _CHECKSUM_ALPHABET[(36 - total % 36) % 36]


def validate_gstin(
    gstin: str | None,
    *,
    verify_checksum: bool | None = None,
) -> GstinValidation:
    """
    Structural and jurisdiction check of a GSTIN.

    The check character is only verified when ``verify_checksum`` is true
    (default: ``settings.VERIFY_GSTIN_CHECKSUM``).
    """
    if not gstin:
        return GstinValidation(
            valid=False,
            error=ErrorKind.MISSING_IDENTIFIER,
            message="GSTIN is required",
        )

    if not isinstance(gstin, str) or not GSTIN_REGEX.fullmatch(gstin):
        return GstinValidation(
            valid=False,
            error=ErrorKind.MALFORMED_IDENTIFIER,
            message="Invalid GSTIN format",
        )

    state_code = gstin[:2]
    if not is_known_state_code(state_code):
        logger.info("GSTIN %s carries unknown state code %s", gstin, state_code)
        return GstinValidation(
            valid=False,
            error=ErrorKind.UNKNOWN_JURISDICTION_CODE,
            message="Invalid state code in GSTIN",
        )

    if verify_checksum is None:
        verify_checksum = settings.VERIFY_GSTIN_CHECKSUM
    if verify_checksum and gstin_check_character(gstin) != gstin[14]:
        return GstinValidation(
            valid=False,
            error=ErrorKind.CHECKSUM_MISMATCH,
            message="GSTIN check character does not match",
        )

    return GstinValidation(valid=True, state_code=state_code)


def validate_pan(pan: str | None) -> PanValidation:
    if not pan:
        return PanValidation(
            valid=False,
            error=ErrorKind.MISSING_IDENTIFIER,
            message="PAN is required",
        )
    if not isinstance(pan, str) or not PAN_REGEX.fullmatch(pan):
        return PanValidation(
            valid=False,
            error=ErrorKind.MALFORMED_IDENTIFIER,
            message="Invalid PAN format",
        )
    return PanValidation(valid=True)
