# taxengine/domain/services/return_composer.py
"""
Single entry point for building any statutory document by kind.

    compose_return("26Q", quarter="Q1", financial_year="2024-25", payments=rows)
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from taxengine.domain.models.returns import ReturnDocument, ReturnKind
from taxengine.domain.services.ewaybill_service import compose_eway_bill
from taxengine.domain.services.gstr1_service import compose_gstr1
from taxengine.domain.services.gstr3b_service import compose_gstr3b
from taxengine.domain.services.tds_certificate import compose_tds_certificate
from taxengine.domain.services.tds_returns import compose_form24q, compose_form26q

logger = logging.getLogger("return_composer")

COMPOSERS: dict[ReturnKind, Callable[..., ReturnDocument]] = {
    ReturnKind.GSTR1: compose_gstr1,
    ReturnKind.GSTR3B: compose_gstr3b,
    ReturnKind.FORM_26Q: compose_form26q,
    ReturnKind.FORM_24Q: compose_form24q,
    ReturnKind.EWAY_BILL: compose_eway_bill,
    ReturnKind.TDS_CERTIFICATE: compose_tds_certificate,
}

if set(COMPOSERS) != set(ReturnKind):
    raise RuntimeError("COMPOSERS does not cover every ReturnKind")


def compose_return(kind: ReturnKind | str, **kwargs: Any) -> ReturnDocument:
    """Dispatch to the composer for ``kind``; keyword arguments pass through."""
    try:
        return_kind = ReturnKind(kind)
    except ValueError as exc:
        raise ValueError(f"Unknown return kind: {kind!r}") from exc

    logger.debug("Composing %s", return_kind.value)
    return COMPOSERS[return_kind](**kwargs)
