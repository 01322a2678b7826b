"""
SMC Detector - Mitigation
Marks zones that price has returned into after they formed.
"""
import logging
import pandas as pd
from dataclasses import replace
from typing import List
from ..models import Zone

logger = logging.getLogger("SMCZones.Detector")


def check_mitigation(df: pd.DataFrame, zones: List[Zone]) -> List[Zone]:
    """
    Return a copy of every zone with is_mitigated/end_time resolved.

    Only candles strictly after the zone's start time count.
    Bullish zone mitigated by the first candle with low <= top.
    Bearish zone mitigated by the first candle with high >= bottom.

    Zones that are already mitigated come back unchanged, so re-running on a
    longer history can add mitigations but never remove or move them.
    """
    result = []
    for zone in zones:
        if zone.is_mitigated:
            result.append(replace(zone))
            continue

        subsequent = df[df['time'] > zone.start_time]

        if zone.is_bullish:
            # Bullish zone mitigated when price drops back into it
            touched = subsequent[subsequent['low'] <= zone.top]
        else:
            # Bearish zone mitigated when price rises back into it
            touched = subsequent[subsequent['high'] >= zone.bottom]

        if len(touched) > 0:
            result.append(replace(zone, is_mitigated=True, end_time=int(touched['time'].iloc[0])))
        else:
            result.append(replace(zone))

    mitigated = sum(1 for z in result if z.is_mitigated)
    logger.debug(f"Mitigation pass: {mitigated}/{len(result)} zones mitigated")
    return result
