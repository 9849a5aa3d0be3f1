# taxengine/domain/services/tds_certificate.py
"""
TDS certificate (Form 16A) for a single vendor payment.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable

from taxengine.core.money import round2
from taxengine.domain.models.records import DeductorDetails, TdsPayment, coerce
from taxengine.domain.models.returns import (
    CertificateDeductee,
    CertificateDeductor,
    CertificatePayment,
    ResponsiblePerson,
    TdsCertificate,
)
from taxengine.domain.services.reference_numbers import generate_utn
from taxengine.domain.services.tax_periods import assessment_year_for

logger = logging.getLogger("tds_certificate")


def _financial_year_of(day: date) -> str:
    """April-March financial year containing ``day``: 2024-07-01 -> "2024-25"."""
    start = day.year if day.month >= 4 else day.year - 1
    return f"{start}-{(start + 1) % 100:02d}"


def compose_tds_certificate(
    payment: Any,
    deductor: Any,
    *,
    reference_factory: Callable[[], str] | None = None,
    issued_on: date | None = None,
) -> TdsCertificate:
    """
    Build Form 16A for ``payment``.

    The assessment year comes from the payment's ``financial_year``; when
    the record has none, the financial year of the payment date is used.
    ``reference_factory`` and ``issued_on`` default to a fresh UTN and
    today's date.
    """
    record = coerce(TdsPayment, payment)
    issuer = coerce(DeductorDetails, deductor)

    financial_year = record.financial_year or _financial_year_of(record.payment_date)
    utn = (reference_factory or generate_utn)()

    certificate = TdsCertificate(
        certificate_type="16A",
        unique_transaction_no=utn,
        assessment_year=assessment_year_for(financial_year),
        deductor_details=CertificateDeductor(
            name=issuer.name,
            address=issuer.address,
            pan=issuer.pan,
            tan=issuer.tan,
        ),
        deductee_details=CertificateDeductee(
            name=record.vendor_name,
            address=record.vendor_address,
            pan=record.vendor_pan,
        ),
        payment_details=CertificatePayment(
            amount=round2(record.amount),
            tds_amount=round2(record.tds_amount),
            tds_rate=record.tds_rate,
            section=record.tds_section,
            payment_date=record.payment_date,
            challan_no=record.challan_no,
            challan_date=record.challan_date,
            bsr_code=record.bsr_code,
        ),
        date_of_generation=issued_on or date.today(),
        responsible_person=ResponsiblePerson(
            name=issuer.responsible_person_name,
            designation=issuer.responsible_person_designation,
        ),
    )

    logger.info(
        "Form 16A composed: utn=%s section=%s tds=%s ay=%s",
        utn, record.tds_section, certificate.payment_details.tds_amount,
        certificate.assessment_year,
    )
    return certificate
