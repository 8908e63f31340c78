"""Ordering for WCAG principle, guideline and success criterion numbers."""

import math
from collections.abc import Iterable
from functools import cmp_to_key

from wcag_build.wcag_item import WcagItem

# Only principle.guideline.criterion are compared; deeper parts are ignored.
MAX_DEPTH = 3


def _to_number(part: str) -> float:
    """Parse one dotted component the way a numeric cast in the data files does.

    Blank components count as 0 and anything unparsable becomes NaN. Unsigned
    0x/0o/0b literals are integers, and only the exact spelling "Infinity" is
    infinite.
    """
    part = part.strip()
    if not part:
        return 0.0
    if "_" in part or not part.isascii():
        return math.nan
    signed = part[0] in "+-"
    unsigned = part[1:] if signed else part
    if unsigned == "Infinity":
        return -math.inf if part[0] == "-" else math.inf
    if unsigned[:2].lower() in ("0x", "0o", "0b"):
        if signed:
            return math.nan
        try:
            return float(int(part, 0))
        except ValueError:
            return math.nan
    # float() also takes inf/nan spellings a numeric cast rejects
    if unsigned[:3].lower() in ("inf", "nan"):
        return math.nan
    try:
        return float(part)
    except ValueError:
        return math.nan


def _num_parts(item: WcagItem) -> list[float]:
    return [_to_number(p) for p in item.num.split(".")]


def _part(parts: list[float], i: int) -> float:
    return parts[i] if i < len(parts) else math.nan


def _present(n: float) -> bool:
    # 0 and NaN are both treated as a missing component.
    return not math.isnan(n) and n != 0


def wcag_sort(a: WcagItem, b: WcagItem) -> int:
    """Compare two items by `num` for sorting ascending.

    Returns a negative, zero or positive value like any three-way comparator.
    A literal 0 component is indistinguishable from a missing one, so "2" and
    "2.0" compare equal.
    """
    a_parts = _num_parts(a)
    b_parts = _num_parts(b)

    for i in range(MAX_DEPTH):
        x = _part(a_parts, i)
        y = _part(b_parts, i)
        if x > y or (_present(x) and not _present(y)):
            return 1
        if x < y or (_present(y) and not _present(x)):
            return -1
    return 0


wcag_sort_key = cmp_to_key(wcag_sort)


def sort_wcag_items(items: Iterable[WcagItem]) -> list[WcagItem]:
    """Return the items as a new list ordered by their WCAG number."""
    return sorted(items, key=wcag_sort_key)
