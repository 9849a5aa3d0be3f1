# taxengine/domain/models/tax_tables.py
"""
Static reference data for the tax engine.

TaxSlab:          closed set of GST slab rates and their CGST/SGST/IGST split.
STATE_CODES:      state / UT name -> 2-digit GST state code.
TdsSection:       TDS sections with rate-with-PAN, rate-without-PAN, threshold(s).
TcsSection:       TCS sections with rate and threshold.
Quarter:          financial-year quarter -> payment months.

All tables are module constants, built once at import and read-only after.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping

UNKNOWN_STATE_CODE = "00"


# ---------------------------------------------------------------------------
# GST slabs
# ---------------------------------------------------------------------------

class TaxSlab(int, Enum):
    NIL = 0
    GST_5 = 5
    GST_12 = 12
    GST_18 = 18
    GST_28 = 28

    @property
    def rate(self) -> Decimal:
        return Decimal(self.value)

    @property
    def cgst_rate(self) -> Decimal:
        return self.rate / 2

    @property
    def sgst_rate(self) -> Decimal:
        return self.rate / 2

    @property
    def igst_rate(self) -> Decimal:
        return self.rate

    @classmethod
    def from_rate(cls, value) -> TaxSlab:
        """Map 18, 18.0, "18" or Decimal("18.00") to ``TaxSlab.GST_18``.

        Raises ``ValueError`` for anything that is not exactly a slab rate.
        """
        try:
            rate = Decimal(str(value).strip())
        except ArithmeticError as exc:
            raise ValueError(f"Invalid GST rate: {value!r}") from exc
        if not rate.is_finite():
            raise ValueError(f"Invalid GST rate: {value!r}")
        for slab in cls:
            if slab.rate == rate:
                return slab
        raise ValueError(f"Invalid GST rate: {value}%")


# ---------------------------------------------------------------------------
# Jurisdictions
# ---------------------------------------------------------------------------

STATE_CODES: Mapping[str, str] = MappingProxyType({
    "ANDHRA PRADESH": "37",
    "ARUNACHAL PRADESH": "12",
    "ASSAM": "18",
    "BIHAR": "10",
    "CHHATTISGARH": "22",
    "GOA": "30",
    "GUJARAT": "24",
    "HARYANA": "06",
    "HIMACHAL PRADESH": "02",
    "JHARKHAND": "20",
    "KARNATAKA": "29",
    "KERALA": "32",
    "MADHYA PRADESH": "23",
    "MAHARASHTRA": "27",
    "MANIPUR": "14",
    "MEGHALAYA": "17",
    "MIZORAM": "15",
    "NAGALAND": "13",
    "ODISHA": "21",
    "PUNJAB": "03",
    "RAJASTHAN": "08",
    "SIKKIM": "11",
    "TAMIL NADU": "33",
    "TELANGANA": "36",
    "TRIPURA": "16",
    "UTTAR PRADESH": "09",
    "UTTARAKHAND": "05",
    "WEST BENGAL": "19",
    "ANDAMAN AND NICOBAR ISLANDS": "35",
    "CHANDIGARH": "04",
    "DADRA AND NAGAR HAVELI": "26",
    "DAMAN AND DIU": "25",
    "DELHI": "07",
    "JAMMU AND KASHMIR": "01",
    "LADAKH": "38",
    "LAKSHADWEEP": "31",
    "PUDUCHERRY": "34",
})

KNOWN_STATE_CODES: frozenset[str] = frozenset(STATE_CODES.values())


# ---------------------------------------------------------------------------
# TDS sections
# ---------------------------------------------------------------------------

class PayeeCategory(str, Enum):
    INDIVIDUAL = "individual"
    HUF = "huf"
    COMPANY = "company"
    FIRM = "firm"
    OTHER = "other"


class TdsSection(str, Enum):
    S194A = "194A"
    S194C = "194C"
    S194H = "194H"
    S194I = "194I"
    S194J = "194J"
    S194O = "194O"
    S194Q = "194Q"
    S194S = "194S"


@dataclass(frozen=True)
class TdsSectionRule:
    section: TdsSection
    description: str
    rate_with_pan: Decimal
    rate_without_pan: Decimal
    threshold: Decimal
    # Only 194C: lower limit for individual / HUF contractors
    individual_threshold: Decimal | None = None
    # Only 194I: rent on plant & machinery
    plant_machinery_rate: Decimal | None = None

    def threshold_for(self, payee_category: PayeeCategory | str | None) -> Decimal:
        if self.individual_threshold is not None and _is_individual(payee_category):
            return self.individual_threshold
        return self.threshold


def _is_individual(payee_category: PayeeCategory | str | None) -> bool:
    if payee_category is None:
        return False
    value = payee_category.value if isinstance(payee_category, PayeeCategory) else str(payee_category)
    return value.strip().lower() == PayeeCategory.INDIVIDUAL.value


TDS_SECTIONS: Mapping[TdsSection, TdsSectionRule] = MappingProxyType({
    TdsSection.S194A: TdsSectionRule(
        TdsSection.S194A, "Interest other than Securities",
        Decimal("10.0"), Decimal("20.0"), Decimal("40000"),
    ),
    TdsSection.S194C: TdsSectionRule(
        TdsSection.S194C, "Payments to contractors",
        Decimal("1.0"), Decimal("20.0"), Decimal("30000"),
        individual_threshold=Decimal("100000"),
    ),
    TdsSection.S194H: TdsSectionRule(
        TdsSection.S194H, "Commission or brokerage",
        Decimal("5.0"), Decimal("20.0"), Decimal("15000"),
    ),
    TdsSection.S194I: TdsSectionRule(
        TdsSection.S194I, "Rent",
        Decimal("10.0"), Decimal("20.0"), Decimal("240000"),
        plant_machinery_rate=Decimal("2.0"),
    ),
    TdsSection.S194J: TdsSectionRule(
        TdsSection.S194J, "Professional/technical services",
        Decimal("10.0"), Decimal("20.0"), Decimal("30000"),
    ),
    TdsSection.S194O: TdsSectionRule(
        TdsSection.S194O, "E-commerce transactions",
        Decimal("1.0"), Decimal("1.0"), Decimal("500000"),
    ),
    TdsSection.S194Q: TdsSectionRule(
        TdsSection.S194Q, "Purchase of goods",
        Decimal("0.1"), Decimal("0.1"), Decimal("5000000"),
    ),
    TdsSection.S194S: TdsSectionRule(
        TdsSection.S194S, "Crypto currency payments",
        Decimal("1.0"), Decimal("1.0"), Decimal("10000"),
    ),
})

# Section 192 is the fixed tag for salary TDS (Form 24Q)
SALARY_TDS_SECTION = "192"


# ---------------------------------------------------------------------------
# TCS sections
# ---------------------------------------------------------------------------

class TcsSection(str, Enum):
    S206C_1H = "206C_1H"
    S206CG = "206CG"


@dataclass(frozen=True)
class TcsSectionRule:
    section: TcsSection
    description: str
    rate: Decimal
    threshold: Decimal


TCS_SECTIONS: Mapping[TcsSection, TcsSectionRule] = MappingProxyType({
    TcsSection.S206C_1H: TcsSectionRule(
        TcsSection.S206C_1H, "Sale of goods", Decimal("0.1"), Decimal("5000000"),
    ),
    TcsSection.S206CG: TcsSectionRule(
        TcsSection.S206CG, "Parking lot/toll plaza", Decimal("2.0"), Decimal("250000"),
    ),
})


# ---------------------------------------------------------------------------
# Financial-year quarters (April start)
# ---------------------------------------------------------------------------

class Quarter(str, Enum):
    Q1 = "Q1"
    Q2 = "Q2"
    Q3 = "Q3"
    Q4 = "Q4"


QUARTER_MONTHS: Mapping[Quarter, frozenset[int]] = MappingProxyType({
    Quarter.Q1: frozenset({4, 5, 6}),
    Quarter.Q2: frozenset({7, 8, 9}),
    Quarter.Q3: frozenset({10, 11, 12}),
    Quarter.Q4: frozenset({1, 2, 3}),
})


if set(TDS_SECTIONS) != set(TdsSection):
    raise RuntimeError("TDS_SECTIONS does not cover every TdsSection")
if set(TCS_SECTIONS) != set(TcsSection):
    raise RuntimeError("TCS_SECTIONS does not cover every TcsSection")
if set(QUARTER_MONTHS) != set(Quarter):
    raise RuntimeError("QUARTER_MONTHS does not cover every Quarter")
