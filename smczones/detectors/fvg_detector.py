"""
SMC Detector - Fair Value Gap Detection
Detects bullish and bearish imbalances (3-candle gaps).
"""
import logging
import pandas as pd
from typing import List
from ..models import Zone, ZoneKind, ZoneDirection

logger = logging.getLogger("SMCZones.Detector")


def detect_imbalances(df: pd.DataFrame,
                      strength_multiplier: float = 5.0,
                      epsilon: float = 1e-6) -> List[Zone]:
    """
    Detect Fair Value Gaps in OHLCV data.

    A Bullish FVG: Gap between C1.high and C3.low (C3.low > C1.high)
    A Bearish FVG: Gap between C1.low and C3.high (C3.high < C1.low)

    Strength is the gap measured against the average range of the three
    candles: a gap equal to the average range scores 5, double scores 10.

    Parameters:
    - df: Bar frame with columns [time, open, high, low, close, volume]
    - strength_multiplier: Score given to a gap of one average range
    - epsilon: Substitute for a zero average range

    Returns:
    - List of Zone objects, the zone starts at the middle candle
    """
    zones = []

    for i in range(2, len(df)):
        c1 = df.iloc[i - 2]  # First candle
        c2 = df.iloc[i - 1]  # Impulse candle (middle)
        c3 = df.iloc[i]      # Third candle

        avg_range = ((c1['high'] - c1['low']) +
                     (c2['high'] - c2['low']) +
                     (c3['high'] - c3['low'])) / 3
        if avg_range == 0:
            avg_range = epsilon

        # Check for Bullish FVG: Gap between C1.high and C3.low
        if c3['low'] > c1['high']:
            gap_size = c3['low'] - c1['high']
            zones.append(Zone(
                id=f"fvg-bull-{i}",
                kind=ZoneKind.IMBALANCE,
                direction=ZoneDirection.BULLISH,
                top=float(c3['low']),
                bottom=float(c1['high']),
                start_time=int(c2['time']),
                strength_score=_clamp(gap_size / avg_range * strength_multiplier),
                origin_index=i
            ))

        # Check for Bearish FVG: Gap between C1.low and C3.high
        elif c3['high'] < c1['low']:
            gap_size = c1['low'] - c3['high']
            zones.append(Zone(
                id=f"fvg-bear-{i}",
                kind=ZoneKind.IMBALANCE,
                direction=ZoneDirection.BEARISH,
                top=float(c1['low']),
                bottom=float(c3['high']),
                start_time=int(c2['time']),
                strength_score=_clamp(gap_size / avg_range * strength_multiplier),
                origin_index=i
            ))

    logger.debug(f"Imbalance scan over {len(df)} bars: {len(zones)} zones")
    return zones


def _clamp(value: float, low: float = 1.0, high: float = 10.0) -> float:
    return float(min(high, max(low, value)))
