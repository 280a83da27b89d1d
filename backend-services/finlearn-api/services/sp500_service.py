# backend-services/finlearn-api/services/sp500_service.py
"""
Paginated S&P 500 directory.

Ordering is by symbol ascending; `page` is clamped to >= 1 and `limit` to
1..SP500_MAX_LIMIT. A page past the end is an empty page, not an error.
"""
import logging
from typing import Optional

import pandas as pd

from shared.contracts import SP500_DEFAULT_LIMIT, SP500_MAX_LIMIT, Sp500Constituent, Sp500Page

logger = logging.getLogger(__name__)


def clamp_page(page: int) -> int:
    return max(1, page)


def clamp_limit(limit: int) -> int:
    return min(max(1, limit), SP500_MAX_LIMIT)


class Sp500Directory:
    def __init__(self, constituents: pd.DataFrame):
        self._frame = constituents.sort_values("symbol", kind="stable").reset_index(drop=True)
        self._sectors = sorted(self._frame["sector"].unique().tolist())

    @property
    def sectors(self):
        return list(self._sectors)

    def list_page(self, page: int = 1, limit: int = SP500_DEFAULT_LIMIT, sector: Optional[str] = None) -> Sp500Page:
        page = clamp_page(page)
        limit = clamp_limit(limit)

        frame = self._frame
        if sector:
            frame = frame[frame["sector"].str.lower() == sector.strip().lower()]

        start = (page - 1) * limit
        window = frame.iloc[start:start + limit]
        logger.debug(
            f"S&P 500 page={page} limit={limit} sector={sector!r}: "
            f"{len(window)} of {len(frame)} rows"
        )
        return Sp500Page(
            stocks=[Sp500Constituent(**row) for row in window.to_dict(orient="records")],
            total=int(len(frame)),
            sectors=self.sectors,
            page=page,
            limit=limit,
        )
