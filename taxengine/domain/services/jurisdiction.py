# taxengine/domain/services/jurisdiction.py
"""
State name -> GST state code resolution and the inter/intra-state decision.

Unknown names resolve to "00" instead of raising. Two unknown names
therefore compare equal and are treated as an intra-state supply; GST
math downstream always gets a definite interstate flag.
"""

from __future__ import annotations

import logging

from taxengine.domain.models.tax_tables import (
    KNOWN_STATE_CODES,
    STATE_CODES,
    UNKNOWN_STATE_CODE,
)

logger = logging.getLogger("jurisdiction")


def normalize_state_name(state_name: str | None) -> str:
    return (state_name or "").strip().upper()


def resolve_state_code(state_name: str | None) -> str:
    """'Maharashtra', ' maharashtra ' and 'MAHARASHTRA' all give '27'."""
    name = normalize_state_name(state_name)
    code = STATE_CODES.get(name)
    if code is None:
        if name:
            logger.warning("Unknown state %r, using code %s", state_name, UNKNOWN_STATE_CODE)
        else:
            logger.debug("No state given, using code %s", UNKNOWN_STATE_CODE)
        return UNKNOWN_STATE_CODE
    return code


def is_interstate(supplier_state: str | None, place_of_supply: str | None) -> bool:
    return resolve_state_code(supplier_state) != resolve_state_code(place_of_supply)


def is_known_state_code(code: str | None) -> bool:
    return code in KNOWN_STATE_CODES
