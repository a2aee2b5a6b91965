"""Split septet sequences into concatenated SMS segments."""

from __future__ import annotations

from typing import List, Sequence

from ..limits import GSM7_MULTI_SEPTETS, GSM7_SINGLE_SEPTETS
from .gsm7 import ESCAPE


def split_septets(
    septets: Sequence[int],
    single_limit: int = GSM7_SINGLE_SEPTETS,
    multi_limit: int = GSM7_MULTI_SEPTETS,
) -> List[List[int]]:
    """Group *septets* into per-segment chunks.

    A sequence that fits *single_limit* stays whole. Longer sequences are cut
    every *multi_limit* septets, moving a cut one septet earlier when it would
    separate an escape from the extension code that follows it.
    """

    total = len(septets)
    chunks: List[List[int]] = []
    start = 0
    end = min(multi_limit if total > single_limit else single_limit, total)
    while end < total:
        if septets[end - 1] == ESCAPE:
            end -= 1
        chunks.append(list(septets[start:end]))
        start = end
        end = min(end + multi_limit, total)
    if start < end:
        chunks.append(list(septets[start:end]))
    return chunks


__all__ = ["split_septets"]
