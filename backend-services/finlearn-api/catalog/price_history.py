# backend-services/finlearn-api/catalog/price_history.py
"""
Synthetic daily price history for the demo stock catalog.

The series is a seeded random walk that ends near the stock's quoted price,
so every process start renders the same chart for the same symbol and day.
"""
import logging
import zlib
from datetime import date, datetime, timezone
from typing import Dict, List, Optional

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

_START_FRACTION = 0.7  # walk starts at 70% of the current price
_DRIFT_CENTER = 0.48   # slightly biased upward
_WICK_MAX = 0.02
_MIN_PRICE = 1.0
_BASE_VOLUME = 50_000_000
_VOLUME_SPREAD = 100_000_000


def _seed_for(symbol: str) -> int:
    return zlib.crc32(symbol.upper().encode("utf-8"))


def generate_price_history(
    symbol: str,
    base_price: float,
    days: int = 365,
    volatility: float = 0.025,
    as_of: Optional[date] = None,
) -> List[Dict]:
    """
    Builds `days + 1` daily bars ending at `as_of` (today, UTC, by default).

    Args:
        symbol: Ticker used to seed the generator.
        base_price: Current price the walk is scaled against.
        days: Number of calendar days back from `as_of`.
        volatility: Max absolute daily move as a fraction of price.
        as_of: Last date of the series.

    Returns:
        list: Dicts with date (YYYY-MM-DD), open, high, low, close, volume.
    """
    if days < 0:
        raise ValueError("days must be non-negative")
    if base_price <= 0:
        raise ValueError("base_price must be positive")

    end = as_of or datetime.now(timezone.utc).date()
    rng = np.random.default_rng(_seed_for(symbol))
    periods = days + 1

    moves = (rng.random(periods) - _DRIFT_CENTER) * volatility
    start = base_price * _START_FRACTION
    closes = np.maximum(start * np.cumprod(1 + moves), _MIN_PRICE)
    opens = np.concatenate(([start], closes[:-1]))

    upper = np.maximum(opens, closes) * (1 + rng.random(periods) * _WICK_MAX)
    lower = np.minimum(opens, closes) * (1 - rng.random(periods) * _WICK_MAX)
    volumes = (_BASE_VOLUME + rng.random(periods) * _VOLUME_SPREAD).astype(np.int64)

    frame = pd.DataFrame(
        {
            "open": opens,
            "high": upper,
            "low": lower,
            "close": closes,
            "volume": volumes,
        },
        index=pd.date_range(end=pd.Timestamp(end), periods=periods, freq="D"),
    ).round({"open": 2, "high": 2, "low": 2, "close": 2})

    logger.debug(f"Generated {len(frame)} price bars for {symbol} ending {end.isoformat()}")
    return [
        {
            "date": row.Index.strftime("%Y-%m-%d"),
            "open": float(row.open),
            "high": float(row.high),
            "low": float(row.low),
            "close": float(row.close),
            "volume": int(row.volume),
        }
        for row in frame.itertuples()
    ]
