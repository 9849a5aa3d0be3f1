# taxengine/domain/services/gst_calculator.py
"""
GST split for a single taxable amount.

Intra-state: CGST + SGST at half the slab rate each.
Inter-state: IGST at the full slab rate.
Components are computed exactly and each output field is rounded to
paise on its own; totals are taken from the unrounded components.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from taxengine.core.money import ZERO, round2, to_decimal
from taxengine.domain.models.results import InvalidRateError, TaxSplit
from taxengine.domain.models.tax_tables import TaxSlab
from taxengine.domain.services.jurisdiction import is_interstate

logger = logging.getLogger("gst_calculator")

HUNDRED = Decimal("100")


def resolve_slab(slab_rate: Any) -> TaxSlab:
    """Return the TaxSlab for ``slab_rate`` or raise InvalidRateError."""
    if isinstance(slab_rate, TaxSlab):
        return slab_rate
    try:
        return TaxSlab.from_rate(slab_rate)
    except ValueError as exc:
        raise InvalidRateError(str(exc)) from exc


def compute_gst(
    amount: Any,
    slab_rate: Any,
    supplier_state: str | None,
    place_of_supply: str | None,
) -> TaxSplit:
    """
    Split GST on ``amount`` at ``slab_rate`` for a supply from
    ``supplier_state`` to ``place_of_supply``.

    Raises:
        InvalidRateError: ``slab_rate`` is not 0, 5, 12, 18 or 28.
    """
    slab = resolve_slab(slab_rate)
    taxable = to_decimal(amount)
    interstate = is_interstate(supplier_state, place_of_supply)

    cgst = sgst = igst = ZERO
    if interstate:
        igst = taxable * slab.igst_rate / HUNDRED
    else:
        cgst = taxable * slab.cgst_rate / HUNDRED
        sgst = taxable * slab.sgst_rate / HUNDRED

    total_tax = cgst + sgst + igst

    logger.debug(
        "GST computed: amount=%s rate=%s interstate=%s tax=%s",
        taxable, slab.value, interstate, total_tax,
    )

    return TaxSplit(
        taxable_amount=round2(taxable),
        rate=slab.rate,
        cgst=round2(cgst),
        sgst=round2(sgst),
        igst=round2(igst),
        total_tax=round2(total_tax),
        total_amount=round2(taxable + total_tax),
        is_interstate=interstate,
    )
