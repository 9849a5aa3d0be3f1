# taxengine/domain/services/gstr1_service.py
"""
GSTR-1 (outward supplies) from a month's sales invoices.

Bucketing, per invoice:
- customer GSTIN present                      -> B2B (any amount)
- no GSTIN and invoice value >= B2CL limit    -> B2CL
- everything else                             -> B2CS

B2B is grouped by recipient GSTIN and B2CL by place of supply, both in
key order. B2CS rows are aggregated per (supply type, place of supply,
rate) as the portal expects.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from decimal import Decimal
from typing import Any, Iterable

from taxengine.config.settings import settings
from taxengine.core.money import PAISE, ZERO, round2
from taxengine.domain.models.records import InvoiceLine, SalesInvoice, coerce_all
from taxengine.domain.models.returns import (
    Gstr1B2BEntry,
    Gstr1B2CLEntry,
    Gstr1B2CSEntry,
    Gstr1Invoice,
    Gstr1Item,
    Gstr1ItemDetail,
    Gstr1Return,
)
from taxengine.domain.models.results import InvalidRateError
from taxengine.domain.models.tax_tables import UNKNOWN_STATE_CODE, TaxSlab
from taxengine.domain.services.jurisdiction import resolve_state_code
from taxengine.domain.services.tax_periods import period_from, return_period

logger = logging.getLogger("gstr1_service")


# ---------- helpers ----------


def _place_of_supply(inv: SalesInvoice) -> str:
    pos = resolve_state_code(inv.place_of_supply)
    if pos == UNKNOWN_STATE_CODE and inv.customer_gstin and inv.customer_gstin[:2].isdigit():
        pos = inv.customer_gstin[:2]
    return pos


def _slab_for_totals(inv: SalesInvoice) -> TaxSlab:
    """
    Slab whose tax on the invoice's taxable value matches its stored tax.

    Stored components are rounded to paise, so the match is within 0.01.
    """
    total_tax = inv.igst_amount + inv.cgst_amount + inv.sgst_amount
    gap, slab = min(
        (abs(inv.total_amount * s.rate / Decimal("100") - total_tax), s) for s in TaxSlab
    )
    if gap > PAISE:
        logger.warning(
            "Invoice %s: tax %s on taxable value %s matches no GST slab",
            inv.invoice_no, total_tax, inv.total_amount,
        )
        raise InvalidRateError(
            f"Invoice {inv.invoice_no}: tax {total_tax} on {inv.total_amount} matches no GST slab"
        )
    return slab


def _lines(inv: SalesInvoice) -> list[InvoiceLine]:
    """Invoice lines, or one synthetic line carrying the invoice totals."""
    if inv.items:
        return inv.items

    return [
        InvoiceLine(
            gst_rate=_slab_for_totals(inv).rate,
            taxable_amount=inv.total_amount,
            igst_amount=inv.igst_amount,
            cgst_amount=inv.cgst_amount,
            sgst_amount=inv.sgst_amount,
            cess_amount=inv.cess_amount,
        )
    ]


def _invoice_entry(inv: SalesInvoice, pos: str) -> Gstr1Invoice:
    items = tuple(
        Gstr1Item(
            num=num,
            itm_det=Gstr1ItemDetail(
                rt=line.gst_rate,
                txval=round2(line.taxable_amount),
                iamt=round2(line.igst_amount),
                camt=round2(line.cgst_amount),
                samt=round2(line.sgst_amount),
                csamt=round2(line.cess_amount),
            ),
        )
        for num, line in enumerate(_lines(inv), start=1)
    )
    return Gstr1Invoice(
        inum=inv.invoice_no,
        idt=inv.invoice_date.strftime("%d-%m-%Y"),
        val=round2(inv.grand_total),
        pos=pos,
        rchrg="Y" if inv.reverse_charge else "N",
        inv_typ="R",
        itms=items,
    )


def _supply_type(pos: str, supplier_code: str | None, line: InvoiceLine) -> str:
    if supplier_code:
        return "INTRA" if pos == supplier_code else "INTER"
    return "INTER" if line.igst_amount else "INTRA"


# ---------- composer ----------


def compose_gstr1(
    period: Any,
    invoices: Iterable[Any],
    gstin: str = "",
    *,
    b2cl_threshold: Decimal | None = None,
) -> Gstr1Return:
    """
    Build the GSTR-1 document for one month.

    Args:
        period: ``{"month": 11, "year": 2025}``, ``(11, 2025)`` or a date.
        invoices: Sales invoices (dicts, rows or ``SalesInvoice``).
        gstin: Supplier GSTIN; its state code decides B2CS supply type.
        b2cl_threshold: Override for the large-invoice limit.
    """
    month, year = period_from(period)
    threshold = settings.B2CL_THRESHOLD if b2cl_threshold is None else Decimal(str(b2cl_threshold))
    supplier_code = gstin[:2] if gstin and gstin[:2].isdigit() else None

    b2b_index: dict[str, list[Gstr1Invoice]] = defaultdict(list)
    b2cl_index: dict[str, list[Gstr1Invoice]] = defaultdict(list)
    b2cs_totals: dict[tuple[str, str, Decimal], dict[str, Decimal]] = defaultdict(
        lambda: {"txval": ZERO, "iamt": ZERO, "camt": ZERO, "samt": ZERO, "csamt": ZERO}
    )

    sales = coerce_all(SalesInvoice, invoices)
    for inv in sales:
        pos = _place_of_supply(inv)

        if inv.is_registered:
            b2b_index[inv.customer_gstin].append(_invoice_entry(inv, pos))
        elif inv.grand_total >= threshold:
            b2cl_index[pos].append(_invoice_entry(inv, pos))
        else:
            for line in _lines(inv):
                key = (_supply_type(pos, supplier_code, line), pos, line.gst_rate)
                bucket = b2cs_totals[key]
                bucket["txval"] += line.taxable_amount
                bucket["iamt"] += line.igst_amount
                bucket["camt"] += line.cgst_amount
                bucket["samt"] += line.sgst_amount
                bucket["csamt"] += line.cess_amount

    b2b = tuple(
        Gstr1B2BEntry(ctin=ctin, inv=tuple(b2b_index[ctin])) for ctin in sorted(b2b_index)
    )
    b2cl = tuple(
        Gstr1B2CLEntry(pos=pos, inv=tuple(b2cl_index[pos])) for pos in sorted(b2cl_index)
    )
    b2cs = tuple(
        Gstr1B2CSEntry(
            sply_ty=sply_ty,
            pos=pos,
            typ="OE",
            rt=rate,
            **{tag: round2(value) for tag, value in b2cs_totals[(sply_ty, pos, rate)].items()},
        )
        for sply_ty, pos, rate in sorted(b2cs_totals)
    )

    document = Gstr1Return(
        gstin=gstin,
        ret_period=return_period(month, year),
        b2b=b2b,
        b2cl=b2cl,
        b2cs=b2cs,
    )

    logger.info(
        "GSTR-1 composed: period=%s invoices=%d b2b_parties=%d b2cl_states=%d b2cs_rows=%d",
        document.ret_period, len(sales), len(b2b), len(b2cl), len(b2cs),
    )
    return document


def summarize_gstr1(document: Gstr1Return) -> dict:
    """Counts and taxable value of a GSTR-1 document, for previews."""
    total_txval = ZERO
    b2b_invoices = 0
    b2cl_invoices = 0
    for entry in document.b2b:
        b2b_invoices += len(entry.inv)
        for inv in entry.inv:
            total_txval += sum((item.itm_det.txval for item in inv.itms), ZERO)
    for entry in document.b2cl:
        b2cl_invoices += len(entry.inv)
        for inv in entry.inv:
            total_txval += sum((item.itm_det.txval for item in inv.itms), ZERO)
    total_txval += sum((row.txval for row in document.b2cs), ZERO)

    return {
        "gstin": document.gstin,
        "ret_period": document.ret_period,
        "b2b_parties": len(document.b2b),
        "b2b_invoices": b2b_invoices,
        "b2cl_invoices": b2cl_invoices,
        "b2cs_rows": len(document.b2cs),
        "total_txval": float(round2(total_txval)),
    }
