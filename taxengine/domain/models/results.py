# taxengine/domain/models/results.py
"""
Per-transaction results returned by the calculators and validators.

Caller-input problems are reported through ``ErrorKind`` on the result
(validators, TDS/TCS) or through ``TaxEngineError`` subclasses (GST rate).
A withholding result that is merely below threshold is not an error.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    INVALID_RATE = "InvalidRate"
    MISSING_IDENTIFIER = "MissingIdentifier"
    MALFORMED_IDENTIFIER = "MalformedIdentifier"
    UNKNOWN_JURISDICTION_CODE = "UnknownJurisdictionCode"
    UNKNOWN_SECTION = "UnknownSection"
    CHECKSUM_MISMATCH = "ChecksumMismatch"


class TaxEngineError(Exception):
    """Base class for errors raised by the engine."""

    kind: ErrorKind | None = None


class InvalidRateError(TaxEngineError, ValueError):
    """Raised when a GST rate is not one of the slab rates."""

    kind = ErrorKind.INVALID_RATE


def _plain(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, Enum):
        return value.value
    return value


# ---------------------------------------------------------------------------
# GST
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TaxSplit:
    """GST split of one taxable amount."""
    taxable_amount: Decimal
    rate: Decimal
    cgst: Decimal
    sgst: Decimal
    igst: Decimal
    total_tax: Decimal
    total_amount: Decimal
    is_interstate: bool

    def to_dict(self) -> dict[str, Any]:
        return {k: _plain(v) for k, v in asdict(self).items()}


# ---------------------------------------------------------------------------
# Identifier validation
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GstinValidation:
    valid: bool
    state_code: str | None = None
    error: ErrorKind | None = None
    message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.valid:
            return {"valid": True, "code": self.state_code}
        return {"valid": False, "error": _plain(self.error), "message": self.message}


@dataclass(frozen=True)
class PanValidation:
    valid: bool
    error: ErrorKind | None = None
    message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.valid:
            return {"valid": True}
        return {"valid": False, "error": _plain(self.error), "message": self.message}


# ---------------------------------------------------------------------------
# Withholding / collection
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class WithholdingResult:
    """TDS on one payment.

    ``error`` is set only when the section is unknown; ``reason`` explains
    a computed-but-not-applicable outcome.
    """
    is_applicable: bool
    rate: Decimal
    threshold: Decimal
    amount: Decimal
    net_amount: Decimal | None
    section: str
    reason: str | None = None
    error: ErrorKind | None = None
    message: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def to_dict(self) -> dict[str, Any]:
        return {k: _plain(v) for k, v in asdict(self).items()}


@dataclass(frozen=True)
class CollectionResult:
    """TCS on one sale."""
    is_applicable: bool
    rate: Decimal
    threshold: Decimal
    amount: Decimal
    total_receivable: Decimal | None
    section: str
    reason: str | None = None
    error: ErrorKind | None = None
    message: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def to_dict(self) -> dict[str, Any]:
        return {k: _plain(v) for k, v in asdict(self).items()}
