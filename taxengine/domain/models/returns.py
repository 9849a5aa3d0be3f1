# taxengine/domain/models/returns.py
"""
Statutory return documents produced by the composers.

Field names are the government / portal tags. GST returns use the portal's
snake-style tags directly (``ret_period``, ``itm_det``); the TDS forms,
certificate and e-Way Bill use camelCase tags, produced through aliases.

Documents are frozen and their collections are tuples, so a document is
never changed after a composer returns it. ``to_payload()`` gives the
JSON-ready dict for export.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from taxengine.core.money import Money, ZERO


class ReturnKind(str, Enum):
    GSTR1 = "GSTR1"
    GSTR3B = "GSTR3B"
    FORM_26Q = "26Q"
    FORM_24Q = "24Q"
    EWAY_BILL = "EWB"
    TDS_CERTIFICATE = "16A"


class _Block(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class _CamelBlock(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class ReturnDocument(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: ClassVar[ReturnKind]

    def to_payload(self) -> dict[str, Any]:
        """Government-tag keyed dict with JSON-native values."""
        return self.model_dump(by_alias=True, mode="json")


# ---------------------------------------------------------------------------
# GSTR-1
# ---------------------------------------------------------------------------

class Gstr1ItemDetail(_Block):
    rt: Money
    txval: Money
    iamt: Money = ZERO
    camt: Money = ZERO
    samt: Money = ZERO
    csamt: Money = ZERO


class Gstr1Item(_Block):
    num: int
    itm_det: Gstr1ItemDetail


class Gstr1Invoice(_Block):
    inum: str  # invoice number
    idt: str  # DD-MM-YYYY
    val: Money  # invoice value incl. tax
    pos: str  # place of supply state code
    rchrg: str = "N"
    inv_typ: str = "R"
    itms: tuple[Gstr1Item, ...] = ()


class Gstr1B2BEntry(_Block):
    ctin: str  # recipient GSTIN
    inv: tuple[Gstr1Invoice, ...] = ()


class Gstr1B2CLEntry(_Block):
    pos: str
    inv: tuple[Gstr1Invoice, ...] = ()


class Gstr1B2CSEntry(_Block):
    sply_ty: str  # INTRA / INTER
    pos: str
    typ: str = "OE"
    rt: Money
    txval: Money
    iamt: Money = ZERO
    camt: Money = ZERO
    samt: Money = ZERO
    csamt: Money = ZERO


class Gstr1Return(ReturnDocument):
    kind: ClassVar[ReturnKind] = ReturnKind.GSTR1

    gstin: str = ""
    ret_period: str  # MMYYYY
    b2b: tuple[Gstr1B2BEntry, ...] = ()
    b2cl: tuple[Gstr1B2CLEntry, ...] = ()
    b2cs: tuple[Gstr1B2CSEntry, ...] = ()
    cdnr: tuple[dict[str, Any], ...] = ()
    cdnur: tuple[dict[str, Any], ...] = ()
    exp: tuple[dict[str, Any], ...] = ()
    at: tuple[dict[str, Any], ...] = ()
    atadj: tuple[dict[str, Any], ...] = ()
    exemp: tuple[dict[str, Any], ...] = ()
    itcr: tuple[dict[str, Any], ...] = ()
    isd: tuple[dict[str, Any], ...] = ()


# ---------------------------------------------------------------------------
# GSTR-3B
# ---------------------------------------------------------------------------

class Gstr3bSectionSummary(_Block):
    ttl_val: Money = ZERO
    ttl_igst: Money = ZERO
    ttl_cgst: Money = ZERO
    ttl_sgst: Money = ZERO
    ttl_cess: Money = ZERO


class Gstr3bTaxAmounts(_Block):
    iamt: Money = ZERO
    camt: Money = ZERO
    samt: Money = ZERO
    csamt: Money = ZERO


class Gstr3bItcEntry(Gstr3bTaxAmounts):
    ty: str = "OTH"


class Gstr3bItcEligible(_Block):
    itc_avl: tuple[Gstr3bItcEntry, ...] = ()
    itc_rev: tuple[Gstr3bItcEntry, ...] = ()
    itc_net: Gstr3bTaxAmounts = Field(default_factory=Gstr3bTaxAmounts)


class Gstr3bInterestLateFee(_Block):
    intr_details: Gstr3bTaxAmounts = Field(default_factory=Gstr3bTaxAmounts)


class Gstr3bReturn(ReturnDocument):
    kind: ClassVar[ReturnKind] = ReturnKind.GSTR3B

    gstin: str = ""
    ret_period: str
    sec_sum: Gstr3bSectionSummary
    itc_elg: Gstr3bItcEligible
    intr_ltfee: Gstr3bInterestLateFee = Field(default_factory=Gstr3bInterestLateFee)


# ---------------------------------------------------------------------------
# Form 26Q / 24Q
# ---------------------------------------------------------------------------

class DeductorBlock(_CamelBlock):
    name: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    pincode: str = ""


class Form26QPayment(_CamelBlock):
    section: str
    amount: Money
    tds_amount: Money
    payment_date: date = Field(alias="date")
    challan_no: str | None = None


class Form26QDeductee(_CamelBlock):
    pan: str | None
    name: str
    total_tds: Money = Field(alias="totalTDS")
    payments: tuple[Form26QPayment, ...] = ()


class Form26QChallan(_CamelBlock):
    challan_no: str
    challan_date: date | None = None
    bsr_code: str | None = None
    amount: Money


class Form26QSummary(_CamelBlock):
    total_deductees: int = 0
    total_tds: Money = Field(default=ZERO, alias="totalTDS")
    total_challan: Money = ZERO


class Form26QReturn(ReturnDocument):
    model_config = ConfigDict(alias_generator=to_camel)

    kind: ClassVar[ReturnKind] = ReturnKind.FORM_26Q

    form_type: str = "26Q"
    quarter: str
    financial_year: str
    assessment_year: str
    pan: str = ""
    tan: str = ""
    deductor_details: DeductorBlock = Field(default_factory=DeductorBlock)
    challan_details: tuple[Form26QChallan, ...] = ()
    deductee_details: tuple[Form26QDeductee, ...] = ()
    summary: Form26QSummary = Field(default_factory=Form26QSummary)


class Form24QEmployee(_CamelBlock):
    pan: str | None
    name: str
    gross_salary: Money
    tds_amount: Money
    section: str
    quarters: tuple[dict[str, Any], ...] = ()


class Form24QSummary(_CamelBlock):
    total_employees: int = 0
    total_tds: Money = Field(default=ZERO, alias="totalTDS")
    total_salary: Money = ZERO


class Form24QReturn(ReturnDocument):
    model_config = ConfigDict(alias_generator=to_camel)

    kind: ClassVar[ReturnKind] = ReturnKind.FORM_24Q

    form_type: str = "24Q"
    quarter: str
    financial_year: str
    assessment_year: str
    pan: str = ""
    tan: str = ""
    deductor_details: DeductorBlock = Field(default_factory=DeductorBlock)
    employee_details: tuple[Form24QEmployee, ...] = ()
    summary: Form24QSummary = Field(default_factory=Form24QSummary)


# ---------------------------------------------------------------------------
# e-Way Bill
# ---------------------------------------------------------------------------

class EWayBillItem(_CamelBlock):
    product_name: str
    product_desc: str
    hsn_code: str
    quantity: Money
    qty_unit: str
    taxable_amount: Money
    sgst_rate: Money = ZERO
    cgst_rate: Money = ZERO
    igst_rate: Money = ZERO
    cess_rate: Money = ZERO


class EWayBill(ReturnDocument):
    model_config = ConfigDict(alias_generator=to_camel)

    kind: ClassVar[ReturnKind] = ReturnKind.EWAY_BILL

    supply_type: str = "O"  # outward
    sub_supply_type: str = "1"  # supply
    doc_type: str = "INV"
    doc_no: str
    doc_date: str  # DD/MM/YYYY
    gstin: str | None = None
    from_gstin: str | None = None
    from_trd_name: str = ""
    from_addr1: str = ""
    from_place: str = ""
    from_pincode: str = ""
    from_state_code: str
    to_gstin: str = "URP"
    to_trd_name: str = ""
    to_addr1: str = ""
    to_place: str = ""
    to_pincode: str = ""
    to_state_code: str
    total_value: Money
    cgst_value: Money = ZERO
    sgst_value: Money = ZERO
    igst_value: Money = ZERO
    cess_value: Money = ZERO
    tot_inv_value: Money
    trans_mode: str = "1"  # road
    trans_distance: str = "0"
    transporter_name: str = ""
    transporter_id: str = ""
    trans_doc_no: str = ""
    trans_doc_date: str = ""
    vehicle_no: str = ""
    vehicle_type: str = "R"  # regular
    item_list: tuple[EWayBillItem, ...] = ()


# ---------------------------------------------------------------------------
# TDS certificate (Form 16A)
# ---------------------------------------------------------------------------

class CertificateDeductor(_CamelBlock):
    name: str = ""
    address: str = ""
    pan: str = ""
    tan: str = ""


class CertificateDeductee(_CamelBlock):
    name: str = ""
    address: str = ""
    pan: str | None = None


class CertificatePayment(_CamelBlock):
    amount: Money
    tds_amount: Money
    tds_rate: Money
    section: str
    payment_date: date = Field(alias="date")
    challan_no: str | None = None
    challan_date: date | None = None
    bsr_code: str | None = None


class ResponsiblePerson(_CamelBlock):
    name: str = ""
    designation: str = ""


class TdsCertificate(ReturnDocument):
    model_config = ConfigDict(alias_generator=to_camel)

    kind: ClassVar[ReturnKind] = ReturnKind.TDS_CERTIFICATE

    certificate_type: str = "16A"
    unique_transaction_no: str
    assessment_year: str
    deductor_details: CertificateDeductor
    deductee_details: CertificateDeductee
    payment_details: CertificatePayment
    date_of_generation: date
    responsible_person: ResponsiblePerson = Field(default_factory=ResponsiblePerson)
