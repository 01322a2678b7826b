"""
Synthetic OHLCV generation.

Random-walk bars with occasional displacement candles (4x moves on a volume
burst), used as the simulated feed when no vendor data is available and to
exercise the detectors on realistic-looking structure.
"""
import logging
import time
import numpy as np
import pandas as pd
from typing import Optional
from .bar_frame import BAR_COLUMNS

logger = logging.getLogger("SMCZones.Data")


def generate_bars(count: int = 200,
                  volatility: float = 200.0,
                  interval: int = 3600,
                  start_time: Optional[int] = None,
                  seed: Optional[int] = None) -> pd.DataFrame:
    """
    Generate a synthetic bar frame.

    Args:
        count: Number of bars
        volatility: Typical price change per hour
        interval: Bar duration in seconds
        start_time: Epoch seconds of the first bar (default: count bars before now)
        seed: Seed for reproducible output

    Returns:
        Bar frame with columns [time, open, high, low, close, volume]
    """
    rng = np.random.default_rng(seed)

    # Starting level roughly matching the asset class of the volatility
    if volatility > 100:
        price = 68000.0
    elif volatility < 0.1:
        price = 1.0850
    else:
        price = 2300.0

    if start_time is None:
        start_time = int(time.time()) - count * interval

    rows = []
    for i in range(count):
        change = (rng.random() - 0.5) * (volatility * (interval / 3600))
        is_big_move = rng.random() > 0.96
        multiplier = (4.0 if rng.random() > 0.5 else -4.0) if is_big_move else 1.0

        open_ = price
        close = open_ + change * multiplier
        high = max(open_, close) + rng.random() * (volatility / 10)
        low = min(open_, close) - rng.random() * (volatility / 10)
        volume = rng.random() * 1000 + (5000 if is_big_move else 0)

        rows.append((start_time + i * interval, open_, high, low, close, volume))
        price = close

    logger.debug(f"Generated {count} synthetic bars (interval={interval}s, seed={seed})")
    return pd.DataFrame(rows, columns=BAR_COLUMNS)
