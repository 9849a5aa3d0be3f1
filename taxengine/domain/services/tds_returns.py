# taxengine/domain/services/tds_returns.py
"""
Quarterly TDS returns.

Form 26Q (non-salary):
  - keep payments whose payment month falls in the quarter
  - one deductee record per vendor PAN; payments without a PAN share the
    ``NOPAN`` record, which is emitted after all PAN records
  - challans grouped by challan number

Form 24Q (salary):
  - one employee record per input row, section 192

The quarter filter looks at the month only, so the caller supplies the
financial year's payments.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from decimal import Decimal
from typing import Any, Iterable

from taxengine.core.money import ZERO, round2
from taxengine.domain.models.records import (
    DeductorDetails,
    SalaryTdsRecord,
    TdsPayment,
    coerce,
    coerce_all,
)
from taxengine.domain.models.returns import (
    DeductorBlock,
    Form24QEmployee,
    Form24QReturn,
    Form24QSummary,
    Form26QChallan,
    Form26QDeductee,
    Form26QPayment,
    Form26QReturn,
    Form26QSummary,
)
from taxengine.domain.models.tax_tables import SALARY_TDS_SECTION, Quarter
from taxengine.domain.services.tax_periods import as_quarter, assessment_year_for, in_quarter

logger = logging.getLogger("tds_returns")

NO_PAN_KEY = "NOPAN"


def _deductor(deductor: Any) -> DeductorDetails:
    if deductor is None:
        return DeductorDetails()
    return coerce(DeductorDetails, deductor)


def _deductor_block(details: DeductorDetails) -> DeductorBlock:
    return DeductorBlock(
        name=details.name,
        address=details.address,
        city=details.city,
        state=details.state,
        pincode=details.pincode,
    )


# ---------------------------------------------------------------------------
# Form 26Q
# ---------------------------------------------------------------------------

def _deductee_order(key: str) -> tuple[bool, str]:
    return key == NO_PAN_KEY, key


def compose_form26q(
    quarter: Quarter | str,
    financial_year: str,
    payments: Iterable[Any],
    deductor: Any = None,
) -> Form26QReturn:
    """
    Build Form 26Q for one quarter.

    Args:
        quarter: "Q1".."Q4".
        financial_year: "2024-25" or "2024-2025".
        payments: Vendor payments with TDS already computed.
        deductor: ``DeductorDetails`` (or dict) for the header block.
    """
    q = as_quarter(quarter)
    assessment_year = assessment_year_for(financial_year)
    details = _deductor(deductor)

    records = [p for p in coerce_all(TdsPayment, payments) if in_quarter(p.payment_date, q)]

    by_pan: dict[str, list[TdsPayment]] = defaultdict(list)
    by_challan: dict[str, list[TdsPayment]] = defaultdict(list)
    for payment in records:
        by_pan[payment.vendor_pan or NO_PAN_KEY].append(payment)
        if payment.challan_no:
            by_challan[payment.challan_no].append(payment)

    deductees = []
    for key in sorted(by_pan, key=_deductee_order):
        group = by_pan[key]
        deductees.append(
            Form26QDeductee(
                pan=group[0].vendor_pan,
                name=group[0].vendor_name,
                total_tds=round2(sum((p.tds_amount for p in group), ZERO)),
                payments=tuple(
                    Form26QPayment(
                        section=p.tds_section,
                        amount=round2(p.amount),
                        tds_amount=round2(p.tds_amount),
                        payment_date=p.payment_date,
                        challan_no=p.challan_no,
                    )
                    for p in group
                ),
            )
        )

    challans = []
    challan_total = ZERO
    for challan_no in sorted(by_challan):
        group = by_challan[challan_no]
        deposited = sum((p.tds_amount for p in group), ZERO)
        challan_total += deposited
        challans.append(
            Form26QChallan(
                challan_no=challan_no,
                challan_date=next((p.challan_date for p in group if p.challan_date), None),
                bsr_code=next((p.bsr_code for p in group if p.bsr_code), None),
                amount=round2(deposited),
            )
        )

    total_tds = sum((p.tds_amount for p in records), ZERO)

    document = Form26QReturn(
        quarter=q.value,
        financial_year=financial_year,
        assessment_year=assessment_year,
        pan=details.pan,
        tan=details.tan,
        deductor_details=_deductor_block(details),
        challan_details=tuple(challans),
        deductee_details=tuple(deductees),
        summary=Form26QSummary(
            total_deductees=len(deductees),
            total_tds=round2(total_tds),
            total_challan=round2(challan_total),
        ),
    )

    if NO_PAN_KEY in by_pan:
        logger.warning(
            "Form 26Q %s %s: %d payment(s) without vendor PAN",
            q.value, financial_year, len(by_pan[NO_PAN_KEY]),
        )
    logger.info(
        "Form 26Q composed: quarter=%s fy=%s payments=%d deductees=%d total_tds=%s",
        q.value, financial_year, len(records), len(deductees), round2(total_tds),
    )
    return document


# ---------------------------------------------------------------------------
# Form 24Q
# ---------------------------------------------------------------------------

def compose_form24q(
    quarter: Quarter | str,
    financial_year: str,
    employees: Iterable[Any],
    deductor: Any = None,
) -> Form24QReturn:
    q = as_quarter(quarter)
    assessment_year = assessment_year_for(financial_year)
    details = _deductor(deductor)
    records = coerce_all(SalaryTdsRecord, employees)

    total_tds: Decimal = sum((e.tds_amount for e in records), ZERO)
    total_salary: Decimal = sum((e.gross_salary for e in records), ZERO)

    document = Form24QReturn(
        quarter=q.value,
        financial_year=financial_year,
        assessment_year=assessment_year,
        pan=details.pan,
        tan=details.tan,
        deductor_details=_deductor_block(details),
        employee_details=tuple(
            Form24QEmployee(
                pan=e.pan,
                name=e.name,
                gross_salary=round2(e.gross_salary),
                tds_amount=round2(e.tds_amount),
                section=SALARY_TDS_SECTION,
                quarters=tuple(e.quarterly_data),
            )
            for e in records
        ),
        summary=Form24QSummary(
            total_employees=len(records),
            total_tds=round2(total_tds),
            total_salary=round2(total_salary),
        ),
    )

    logger.info(
        "Form 24Q composed: quarter=%s fy=%s employees=%d total_tds=%s",
        q.value, financial_year, len(records), round2(total_tds),
    )
    return document
