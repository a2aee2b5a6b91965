"""Segment capacities for concatenated SMS user data."""

from __future__ import annotations

GSM7_SINGLE_SEPTETS = 160
GSM7_MULTI_SEPTETS = 153

UCS2_SINGLE_UNITS = 70
UCS2_MULTI_UNITS = 67

MAX_PARTS = 255

# UDHL + IEI + IEDL + reference + total + index
CONCAT_UDH_LENGTH = 6

__all__ = [
    "GSM7_SINGLE_SEPTETS",
    "GSM7_MULTI_SEPTETS",
    "UCS2_SINGLE_UNITS",
    "UCS2_MULTI_UNITS",
    "MAX_PARTS",
    "CONCAT_UDH_LENGTH",
]
