# taxengine/domain/models/records.py
"""
Transaction records handed to the return composers by the record store.

Every model accepts a plain dict or any object exposing the same
attribute names (ORM rows), so the store can pass its rows straight in.
Monetary fields are the already-computed, already-rounded values that the
store persisted from the calculators.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Annotated, Any, Iterable, TypeVar

from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)

_RECORD_CONFIG = ConfigDict(from_attributes=True, extra="ignore")


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    if isinstance(value, str):
        return value.strip()
    return value


def _none_to_empty(value: Any) -> Any:
    return "" if value is None else value


def _none_to_zero(value: Any) -> Any:
    return Decimal("0") if value is None else value


# GSTIN / PAN / challan fields: blank strings mean "not available"
OptionalId = Annotated[str | None, BeforeValidator(_blank_to_none)]
# Nullable TEXT columns (address, city, description, ...)
OptionalText = Annotated[str, BeforeValidator(_none_to_empty)]
# Nullable amount columns
Amount = Annotated[Decimal, BeforeValidator(_none_to_zero)]


class InvoiceLine(BaseModel):
    model_config = _RECORD_CONFIG

    name: OptionalText = ""
    description: OptionalText = ""
    hsn_code: OptionalText = ""
    quantity: Decimal = Decimal("1")
    unit: str = "NOS"
    gst_rate: Amount = Decimal("0")
    taxable_amount: Amount = Decimal("0")
    cgst_rate: Decimal | None = None
    sgst_rate: Decimal | None = None
    igst_rate: Decimal | None = None
    cgst_amount: Amount = Decimal("0")
    sgst_amount: Amount = Decimal("0")
    igst_amount: Amount = Decimal("0")
    cess_amount: Amount = Decimal("0")

    @field_validator("quantity", "unit", mode="before")
    @classmethod
    def default_when_null(cls, value: Any, info: ValidationInfo) -> Any:
        return cls.model_fields[info.field_name].default if value is None else value


class SalesInvoice(BaseModel):
    """Outward invoice. ``total_amount`` is the taxable value before GST."""
    model_config = _RECORD_CONFIG

    invoice_no: str
    invoice_date: date
    customer_gstin: OptionalId = None
    customer_name: OptionalText = ""
    customer_address: OptionalText = ""
    customer_city: OptionalText = ""
    customer_pincode: OptionalText = ""
    customer_state: OptionalText = ""
    place_of_supply: OptionalText = ""
    total_amount: Amount = Decimal("0")
    cgst_amount: Amount = Decimal("0")
    sgst_amount: Amount = Decimal("0")
    igst_amount: Amount = Decimal("0")
    cess_amount: Amount = Decimal("0")
    total_gst: Amount = Decimal("0")
    grand_total: Amount = Decimal("0")
    reverse_charge: bool = False
    items: list[InvoiceLine] = Field(default_factory=list)

    @property
    def is_registered(self) -> bool:
        return self.customer_gstin is not None


class PurchaseInvoice(BaseModel):
    """Inward invoice; its tax components feed input tax credit."""
    model_config = _RECORD_CONFIG

    invoice_no: OptionalText = ""
    invoice_date: date | None = None
    supplier_gstin: OptionalId = None
    total_amount: Amount = Decimal("0")
    cgst_amount: Amount = Decimal("0")
    sgst_amount: Amount = Decimal("0")
    igst_amount: Amount = Decimal("0")
    cess_amount: Amount = Decimal("0")


class TdsPayment(BaseModel):
    """Vendor payment with TDS already computed."""
    model_config = _RECORD_CONFIG

    vendor_pan: OptionalId = None
    vendor_name: OptionalText = ""
    vendor_address: OptionalText = ""
    tds_section: str
    amount: Decimal
    tds_amount: Amount = Decimal("0")
    tds_rate: Amount = Decimal("0")
    payment_date: date
    challan_no: OptionalId = None
    challan_date: date | None = None
    bsr_code: OptionalId = None
    financial_year: str | None = None


class SalaryTdsRecord(BaseModel):
    """Per-employee salary and TDS for the quarter."""
    model_config = _RECORD_CONFIG

    pan: OptionalId = None
    name: OptionalText = ""
    gross_salary: Amount = Decimal("0")
    tds_amount: Amount = Decimal("0")
    quarterly_data: list[dict[str, Any]] = Field(
        default_factory=list,
        validation_alias=AliasChoices("quarterly_data", "quarters"),
    )


class PartyDetails(BaseModel):
    model_config = _RECORD_CONFIG

    name: OptionalText = ""
    gstin: OptionalId = None
    address: OptionalText = ""
    city: OptionalText = ""
    pincode: OptionalText = ""
    state: OptionalText = ""
    pan: OptionalId = None


class DeductorDetails(BaseModel):
    model_config = _RECORD_CONFIG

    name: OptionalText = ""
    address: OptionalText = ""
    city: OptionalText = ""
    state: OptionalText = ""
    pincode: OptionalText = ""
    pan: OptionalText = ""
    tan: OptionalText = ""
    responsible_person_name: OptionalText = ""
    responsible_person_designation: OptionalText = ""


class TransportDetails(BaseModel):
    model_config = _RECORD_CONFIG

    trans_mode: str = "1"
    distance: str = "0"
    transporter_name: OptionalText = ""
    transporter_id: OptionalText = ""
    trans_doc_no: OptionalText = ""
    trans_doc_date: OptionalText = ""
    vehicle_no: OptionalText = ""
    vehicle_type: str = "R"

    @field_validator("trans_mode", "distance", "vehicle_type", mode="before")
    @classmethod
    def placeholder_as_text(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return str(value) if isinstance(value, (int, float, Decimal)) else value


# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------

RecordT = TypeVar("RecordT", bound=BaseModel)


def coerce(model: type[RecordT], record: Any) -> RecordT:
    """Return ``record`` as an instance of ``model`` (dict / ORM row / model)."""
    if isinstance(record, model):
        return record
    return model.model_validate(record)


def coerce_all(model: type[RecordT], records: Iterable[Any] | None) -> list[RecordT]:
    return [coerce(model, r) for r in (records or [])]
