# taxengine/domain/services/ewaybill_service.py
"""
e-Way Bill document for one outward invoice.

Party state codes go through the jurisdiction table; values and per-line
rates are echoed from the invoice as stored, never recomputed. Transport
fields default to road / regular vehicle placeholders and are filled in
from ``TransportDetails`` when the caller has them.
"""

from __future__ import annotations

import logging
from typing import Any

from taxengine.core.money import ZERO, round2
from taxengine.domain.models.records import (
    PartyDetails,
    SalesInvoice,
    TransportDetails,
    coerce,
)
from taxengine.domain.models.returns import EWayBill, EWayBillItem
from taxengine.domain.services.jurisdiction import resolve_state_code

logger = logging.getLogger("ewaybill_service")

# Transport mode mapping
TRANSPORT_MODES = {
    "1": ("1", "Road"),
    "2": ("2", "Rail"),
    "3": ("3", "Air"),
    "4": ("4", "Ship"),
}

UNREGISTERED_GSTIN = "URP"


def _recipient_from_invoice(invoice: SalesInvoice) -> PartyDetails:
    return PartyDetails(
        name=invoice.customer_name,
        gstin=invoice.customer_gstin,
        address=invoice.customer_address,
        city=invoice.customer_city,
        pincode=invoice.customer_pincode,
        state=invoice.customer_state or invoice.place_of_supply,
    )


def _items(invoice: SalesInvoice) -> tuple[EWayBillItem, ...]:
    return tuple(
        EWayBillItem(
            product_name=line.name,
            product_desc=line.description,
            hsn_code=line.hsn_code,
            quantity=line.quantity,
            qty_unit=line.unit,
            taxable_amount=round2(line.taxable_amount),
            sgst_rate=line.sgst_rate or ZERO,
            cgst_rate=line.cgst_rate or ZERO,
            igst_rate=line.igst_rate or ZERO,
            cess_rate=ZERO,
        )
        for line in invoice.items
    )


def compose_eway_bill(
    invoice: Any,
    supplier: Any,
    recipient: Any = None,
    transport: Any = None,
) -> EWayBill:
    """
    Build the e-Way Bill for ``invoice``.

    Parameters
    ----------
    invoice : SalesInvoice | dict
        The stored sales invoice, with its lines.
    supplier : PartyDetails | dict
        The issuing business.
    recipient : PartyDetails | dict, optional
        Defaults to the invoice's ``customer_*`` fields.
    transport : TransportDetails | dict, optional
        Vehicle / transporter details; placeholders when absent.
    """
    inv = coerce(SalesInvoice, invoice)
    seller = coerce(PartyDetails, supplier)
    buyer = _recipient_from_invoice(inv) if recipient is None else coerce(PartyDetails, recipient)
    trans = TransportDetails() if transport is None else coerce(TransportDetails, transport)

    if trans.trans_mode not in TRANSPORT_MODES:
        logger.warning("Unknown transport mode %r on invoice %s", trans.trans_mode, inv.invoice_no)

    document = EWayBill(
        supply_type="O",
        sub_supply_type="1",
        doc_type="INV",
        doc_no=inv.invoice_no,
        doc_date=inv.invoice_date.strftime("%d/%m/%Y"),
        gstin=seller.gstin,
        from_gstin=seller.gstin,
        from_trd_name=seller.name,
        from_addr1=seller.address,
        from_place=seller.city,
        from_pincode=seller.pincode,
        from_state_code=resolve_state_code(seller.state),
        to_gstin=buyer.gstin or inv.customer_gstin or UNREGISTERED_GSTIN,
        to_trd_name=buyer.name,
        to_addr1=buyer.address,
        to_place=buyer.city,
        to_pincode=buyer.pincode,
        to_state_code=resolve_state_code(buyer.state),
        total_value=round2(inv.total_amount),
        cgst_value=round2(inv.cgst_amount),
        sgst_value=round2(inv.sgst_amount),
        igst_value=round2(inv.igst_amount),
        cess_value=round2(inv.cess_amount),
        tot_inv_value=round2(inv.grand_total),
        trans_mode=trans.trans_mode,
        trans_distance=trans.distance,
        transporter_name=trans.transporter_name,
        transporter_id=trans.transporter_id,
        trans_doc_no=trans.trans_doc_no,
        trans_doc_date=trans.trans_doc_date,
        vehicle_no=trans.vehicle_no,
        vehicle_type=trans.vehicle_type,
        item_list=_items(inv),
    )

    logger.info(
        "e-Way Bill composed: doc=%s from=%s to=%s value=%s items=%d",
        document.doc_no, document.from_state_code, document.to_state_code,
        document.tot_inv_value, len(document.item_list),
    )
    return document
