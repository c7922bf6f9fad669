from __future__ import annotations

import math
from collections.abc import Sequence

from .models import Vendor, VendorPage

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100


def coerce_int(value: int | str | None, default: int) -> int:
    """Best-effort integer coercion for query-string input.

    ``"3"`` and ``"3.7"`` both give 3; blank or unparseable input gives
    *default*. Nothing here raises.
    """
    if value is None:
        return default
    if isinstance(value, int):
        return value
    try:
        number = float(str(value).strip())
    except ValueError:
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return int(number)


def paginate(
    items: Sequence[Vendor],
    page: int | str | None = DEFAULT_PAGE,
    limit: int | str | None = DEFAULT_LIMIT,
) -> VendorPage:
    """Slice *items* into one page of the pagination envelope.

    ``page`` is clamped to >= 1 and ``limit`` to [1, MAX_LIMIT]. Pages past
    the end yield empty ``data``; ``total`` always reports the full length.
    """
    p = max(1, coerce_int(page, DEFAULT_PAGE))
    lim = max(1, min(MAX_LIMIT, coerce_int(limit, DEFAULT_LIMIT)))
    total = len(items)
    start = (p - 1) * lim
    return VendorPage(
        page=p,
        limit=lim,
        total=total,
        total_pages=math.ceil(total / lim),
        data=list(items[start:start + lim]),
    )
