"""
SMC Detector - Order Block Detection
Detects institutional Order Blocks behind high-volume breakouts.
"""
import logging
import pandas as pd
from typing import List
from ..models import Zone, ZoneKind, ZoneDirection

logger = logging.getLogger("SMCZones.Detector")


def detect_order_blocks(df: pd.DataFrame,
                        bos_lookback: int = 5,
                        volume_surge: float = 1.3,
                        base_search: int = 4,
                        fallback_strength: float = 5.0,
                        epsilon: float = 1e-6) -> List[Zone]:
    """
    Detect Order Blocks in OHLCV data.

    An Order Block is the last opposing candle before a breakout candle that
    closes beyond the recent swing high/low on a volume surge.

    Parameters:
    - df: Bar frame with columns [time, open, high, low, close, volume]
    - bos_lookback: Number of candles that define the recent high/low
    - volume_surge: Breakout volume must exceed the previous candle's volume by this factor
    - base_search: Number of candles scanned backward for the opposing candle
    - fallback_strength: Score used when the expansion ratio is not positive
    - epsilon: Substitute for a zero-range base candle

    Returns:
    - List of Zone objects, the zone starts at the breakout candle
    """
    zones = []

    for i in range(bos_lookback, len(df)):
        current = df.iloc[i]
        prev = df.iloc[i - 1]

        window = df.iloc[i - bos_lookback:i]
        recent_high = window['high'].max()
        recent_low = window['low'].min()
        volume_ok = current['volume'] > prev['volume'] * volume_surge

        # --- Check for BULLISH breakout ---
        if current['close'] > recent_high and volume_ok:
            base = _find_last_opposing_candle(df, i, is_bullish=True, max_lookback=base_search)
            expansion = current['close'] - base['high']
            strength = _strength(expansion, base, fallback_strength, epsilon)

            zones.append(Zone(
                id=f"ob-bull-{i}",
                kind=ZoneKind.ORDER_BLOCK,
                direction=ZoneDirection.BULLISH,
                top=float(base['high']),
                bottom=float(base['low']),
                start_time=int(current['time']),
                strength_score=strength,
                origin_index=i
            ))

        # --- Check for BEARISH breakout ---
        elif current['close'] < recent_low and volume_ok:
            base = _find_last_opposing_candle(df, i, is_bullish=False, max_lookback=base_search)
            expansion = base['low'] - current['close']
            strength = _strength(expansion, base, fallback_strength, epsilon)

            zones.append(Zone(
                id=f"ob-bear-{i}",
                kind=ZoneKind.ORDER_BLOCK,
                direction=ZoneDirection.BEARISH,
                top=float(base['high']),
                bottom=float(base['low']),
                start_time=int(current['time']),
                strength_score=strength,
                origin_index=i
            ))

    logger.debug(f"Order block scan over {len(df)} bars: {len(zones)} zones")
    return zones


def _find_last_opposing_candle(df: pd.DataFrame, i: int, is_bullish: bool, max_lookback: int = 4) -> pd.Series:
    """
    Find the last opposing candle before the breakout.

    For bullish OB: Find last bearish candle
    For bearish OB: Find last bullish candle
    Falls back to the candle right before the breakout when none is found.
    """
    for j in range(i - 1, max(-1, i - max_lookback - 1), -1):
        candle = df.iloc[j]

        if is_bullish:
            # Looking for bearish candle (close < open)
            if candle['close'] < candle['open']:
                return candle
        else:
            # Looking for bullish candle (close > open)
            if candle['close'] > candle['open']:
                return candle

    return df.iloc[i - 1]


def _strength(expansion: float, base: pd.Series, fallback: float, epsilon: float) -> float:
    """Expansion beyond the base candle in units of half its range, capped at 10."""
    base_range = base['high'] - base['low']
    if base_range == 0:
        base_range = epsilon

    strength = min(10.0, expansion / base_range * 2)
    return float(strength) if strength > 0 else fallback
