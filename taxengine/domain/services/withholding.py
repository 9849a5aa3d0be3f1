# taxengine/domain/services/withholding.py
"""
TDS (tax deducted at source) and TCS (tax collected at source).

TDS:
  - Threshold per section; 194C uses a higher limit for individual payees.
  - Applicable when amount >= threshold (the threshold itself is taxed).
  - Rate depends on whether the payee's PAN is available.
TCS:
  - Separate two-section catalog, no PAN split, no category override.

An unknown section yields a non-applicable result carrying
``ErrorKind.UNKNOWN_SECTION``; being below threshold is a normal outcome
with a ``reason`` and no error.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from taxengine.core.money import ZERO, round2, to_decimal
from taxengine.domain.models.results import CollectionResult, ErrorKind, WithholdingResult
from taxengine.domain.models.tax_tables import (
    TCS_SECTIONS,
    TDS_SECTIONS,
    PayeeCategory,
    TcsSection,
    TdsSection,
)

logger = logging.getLogger("withholding")

HUNDRED = Decimal("100")


def _section_key(section: Any) -> str:
    return section.value if isinstance(section, (TdsSection, TcsSection)) else str(section or "").strip()


# ---------------------------------------------------------------------------
# TDS
# ---------------------------------------------------------------------------

def compute_tds(
    amount: Any,
    section: TdsSection | str,
    identifier_available: bool = False,
    payee_category: PayeeCategory | str = PayeeCategory.COMPANY,
    *,
    plant_and_machinery: bool = False,
) -> WithholdingResult:
    """
    TDS on a single payment.

    Args:
        amount: Payment amount.
        section: TDS section code, e.g. "194C".
        identifier_available: Payee has furnished a PAN.
        payee_category: "individual", "company", ... (only 194C cares).
        plant_and_machinery: 194I rent is for plant & machinery.
    """
    payment = to_decimal(amount)
    code = _section_key(section)

    try:
        rule = TDS_SECTIONS[TdsSection(code)]
    except ValueError:
        logger.warning("Unknown TDS section %r", section)
        return WithholdingResult(
            is_applicable=False,
            rate=ZERO,
            threshold=ZERO,
            amount=ZERO,
            net_amount=None,
            section=code,
            error=ErrorKind.UNKNOWN_SECTION,
            message=f"Invalid TDS section: {code}",
        )

    threshold = rule.threshold_for(payee_category)

    if payment < threshold:
        return WithholdingResult(
            is_applicable=False,
            rate=ZERO,
            threshold=threshold,
            amount=ZERO,
            net_amount=round2(payment),
            section=rule.section.value,
            reason=f"Payment amount {payment} is below threshold {threshold}",
        )

    if not identifier_available:
        rate = rule.rate_without_pan
    elif plant_and_machinery and rule.plant_machinery_rate is not None:
        rate = rule.plant_machinery_rate
    else:
        rate = rule.rate_with_pan

    withheld = round2(payment * rate / HUNDRED)

    logger.debug(
        "TDS computed: section=%s amount=%s rate=%s withheld=%s",
        rule.section.value, payment, rate, withheld,
    )

    return WithholdingResult(
        is_applicable=True,
        rate=rate,
        threshold=threshold,
        amount=withheld,
        net_amount=round2(payment - withheld),
        section=rule.section.value,
    )


def describe_tds_section(section: TdsSection | str) -> str:
    try:
        return TDS_SECTIONS[TdsSection(_section_key(section))].description
    except ValueError:
        return "Unknown section"


def get_tds_rate_card() -> list[dict[str, Any]]:
    """All TDS sections with their rates and thresholds, for display."""
    card = []
    for rule in TDS_SECTIONS.values():
        entry = {
            "section": rule.section.value,
            "description": rule.description,
            "with_pan": float(rule.rate_with_pan),
            "without_pan": float(rule.rate_without_pan),
            "threshold": float(rule.threshold),
        }
        if rule.individual_threshold is not None:
            entry["threshold_individual"] = float(rule.individual_threshold)
        if rule.plant_machinery_rate is not None:
            entry["plant_machinery_rate"] = float(rule.plant_machinery_rate)
        card.append(entry)
    return card


# ---------------------------------------------------------------------------
# TCS
# ---------------------------------------------------------------------------

def compute_tcs(amount: Any, section: TcsSection | str) -> CollectionResult:
    """TCS on a single sale; ``total_receivable`` = sale + TCS."""
    sale = to_decimal(amount)
    code = _section_key(section)

    try:
        rule = TCS_SECTIONS[TcsSection(code)]
    except ValueError:
        logger.warning("Unknown TCS section %r", section)
        return CollectionResult(
            is_applicable=False,
            rate=ZERO,
            threshold=ZERO,
            amount=ZERO,
            total_receivable=None,
            section=code,
            error=ErrorKind.UNKNOWN_SECTION,
            message=f"Invalid TCS section: {code}",
        )

    if sale < rule.threshold:
        return CollectionResult(
            is_applicable=False,
            rate=ZERO,
            threshold=rule.threshold,
            amount=ZERO,
            total_receivable=round2(sale),
            section=rule.section.value,
            reason=f"Sale amount {sale} is below threshold {rule.threshold}",
        )

    collected = round2(sale * rule.rate / HUNDRED)

    logger.debug(
        "TCS computed: section=%s amount=%s rate=%s collected=%s",
        rule.section.value, sale, rule.rate, collected,
    )

    return CollectionResult(
        is_applicable=True,
        rate=rule.rate,
        threshold=rule.threshold,
        amount=collected,
        total_receivable=round2(sale + collected),
        section=rule.section.value,
    )
