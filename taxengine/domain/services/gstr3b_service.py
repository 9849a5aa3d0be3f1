# taxengine/domain/services/gstr3b_service.py
"""
GSTR-3B monthly summary.

Outward side (sec_sum) totals every sales invoice; the ITC side totals
every purchase invoice into a single "OTH" (all other ITC) row. Purchase
records are domestic supplies, so the credit is not filed under "IMPG"
(import of goods). No per-invoice detail survives into the document.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from taxengine.core.money import ZERO, round2
from taxengine.domain.models.records import PurchaseInvoice, SalesInvoice, coerce_all
from taxengine.domain.models.returns import (
    Gstr3bItcEligible,
    Gstr3bItcEntry,
    Gstr3bReturn,
    Gstr3bSectionSummary,
    Gstr3bTaxAmounts,
)
from taxengine.domain.services.tax_periods import period_from, return_period

logger = logging.getLogger("gstr3b_service")


def compose_gstr3b(
    period: Any,
    sales: Iterable[Any],
    purchases: Iterable[Any],
    gstin: str = "",
) -> Gstr3bReturn:
    month, year = period_from(period)
    outward = coerce_all(SalesInvoice, sales)
    inward = coerce_all(PurchaseInvoice, purchases)

    # ---- outward supplies ----
    ttl_val = ttl_igst = ttl_cgst = ttl_sgst = ttl_cess = ZERO
    for inv in outward:
        ttl_val += inv.total_amount
        ttl_igst += inv.igst_amount
        ttl_cgst += inv.cgst_amount
        ttl_sgst += inv.sgst_amount
        ttl_cess += inv.cess_amount

    # ---- eligible ITC ----
    itc_igst = itc_cgst = itc_sgst = itc_cess = ZERO
    for inv in inward:
        itc_igst += inv.igst_amount
        itc_cgst += inv.cgst_amount
        itc_sgst += inv.sgst_amount
        itc_cess += inv.cess_amount

    available = Gstr3bItcEntry(
        ty="OTH",
        iamt=round2(itc_igst),
        camt=round2(itc_cgst),
        samt=round2(itc_sgst),
        csamt=round2(itc_cess),
    )

    document = Gstr3bReturn(
        gstin=gstin,
        ret_period=return_period(month, year),
        sec_sum=Gstr3bSectionSummary(
            ttl_val=round2(ttl_val),
            ttl_igst=round2(ttl_igst),
            ttl_cgst=round2(ttl_cgst),
            ttl_sgst=round2(ttl_sgst),
            ttl_cess=round2(ttl_cess),
        ),
        itc_elg=Gstr3bItcEligible(
            itc_avl=(available,),
            itc_rev=(),
            itc_net=Gstr3bTaxAmounts(
                iamt=available.iamt,
                camt=available.camt,
                samt=available.samt,
                csamt=available.csamt,
            ),
        ),
    )

    logger.info(
        "GSTR-3B composed: period=%s sales=%d purchases=%d outward_tax=%s itc=%s",
        document.ret_period,
        len(outward),
        len(inward),
        round2(ttl_igst + ttl_cgst + ttl_sgst + ttl_cess),
        round2(itc_igst + itc_cgst + itc_sgst + itc_cess),
    )
    return document


def net_tax_payable(document: Gstr3bReturn) -> dict[str, Any]:
    """
    Output tax minus ITC per head, floored at zero.

    Cross-utilisation of ITC across heads is left to the filer.
    """
    out = document.sec_sum
    itc = document.itc_elg.itc_net
    heads = {
        "igst": (out.ttl_igst, itc.iamt),
        "cgst": (out.ttl_cgst, itc.camt),
        "sgst": (out.ttl_sgst, itc.samt),
        "cess": (out.ttl_cess, itc.csamt),
    }
    payable = {head: max(output - credit, ZERO) for head, (output, credit) in heads.items()}
    payable["total"] = sum(payable.values(), ZERO)
    return payable
