"""
SMC Detector - Liquidity Sweep Detection
Detects wicks that run a recent extreme and close back inside it (stop hunts).
"""
import logging
import pandas as pd
from typing import List
from ..models import Zone, ZoneKind, ZoneDirection

logger = logging.getLogger("SMCZones.Detector")


def detect_liquidity_sweeps(df: pd.DataFrame,
                            lookback: int = 30,
                            fallback_strength: float = 7.0,
                            epsilon: float = 1e-6) -> List[Zone]:
    """
    Detect Liquidity Sweeps in OHLCV data.

    Bearish sweep: high runs above the window high, close rejects back below it.
    Bullish sweep: low runs below the window low, close rejects back above it.
    One candle can sweep both sides.

    Strength = relative volume x (sweep depth / candle range) x 10, capped at 10.

    Parameters:
    - df: Bar frame with columns [time, open, high, low, close, volume]
    - lookback: Window of candles before the current one holding the liquidity
    - fallback_strength: Score used when the raw strength is zero
    - epsilon: Substitute for a zero candle range or zero average volume

    Returns:
    - List of Zone objects, the zone starts at the sweeping candle
    """
    zones = []

    for i in range(lookback, len(df)):
        current = df.iloc[i]
        window = df.iloc[i - lookback:i]

        local_high = window['high'].max()
        local_low = window['low'].min()
        avg_volume = window['volume'].mean()
        if avg_volume == 0:
            avg_volume = epsilon

        candle_range = current['high'] - current['low']
        if candle_range == 0:
            candle_range = epsilon

        relative_volume = current['volume'] / avg_volume

        # Sweep of buy-side liquidity (old high)
        if current['high'] > local_high and current['close'] < local_high:
            sweep_depth = current['high'] - local_high
            strength = min(10.0, relative_volume * (sweep_depth / candle_range) * 10)

            zones.append(Zone(
                id=f"sweep-high-{i}",
                kind=ZoneKind.LIQUIDITY_SWEEP,
                direction=ZoneDirection.BEARISH,
                top=float(current['high']),
                bottom=float(local_high),
                start_time=int(current['time']),
                strength_score=float(strength) or fallback_strength,
                origin_index=i
            ))

        # Sweep of sell-side liquidity (old low)
        if current['low'] < local_low and current['close'] > local_low:
            sweep_depth = local_low - current['low']
            strength = min(10.0, relative_volume * (sweep_depth / candle_range) * 10)

            zones.append(Zone(
                id=f"sweep-low-{i}",
                kind=ZoneKind.LIQUIDITY_SWEEP,
                direction=ZoneDirection.BULLISH,
                top=float(local_low),
                bottom=float(current['low']),
                start_time=int(current['time']),
                strength_score=float(strength) or fallback_strength,
                origin_index=i
            ))

    logger.debug(f"Liquidity sweep scan over {len(df)} bars: {len(zones)} zones")
    return zones
