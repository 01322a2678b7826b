"""
SMC Zones - Detection Pipeline
Runs the three zone detectors over one bar snapshot and resolves mitigation.
"""
import logging
import pandas as pd
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union
from .models import Bar, Zone
from .data.bar_frame import to_bar_frame
from .detectors import detect_imbalances, detect_order_blocks, detect_liquidity_sweeps, check_mitigation

logger = logging.getLogger("SMCZones.Engine")

Bars = Union[pd.DataFrame, Iterable[Bar]]


@dataclass
class DetectionConfig:
    # Lookbacks and fallbacks are empirically tuned heuristics
    fvg_strength_multiplier: float = 5.0
    ob_lookback: int = 5
    ob_volume_surge: float = 1.3
    ob_base_search: int = 4
    ob_fallback_strength: float = 5.0
    sweep_lookback: int = 30
    sweep_fallback_strength: float = 7.0
    epsilon: float = 1e-6
    enable_imbalances: bool = True
    enable_order_blocks: bool = True
    enable_liquidity_sweeps: bool = True

    @classmethod
    def from_config(cls, config: Optional[dict]) -> "DetectionConfig":
        """Builds from the 'detection' section of the loaded YAML config."""
        if not config:
            return cls()
        return cls(**(config.get('detection') or {}))


def detect(bars: Bars, config: Optional[DetectionConfig] = None) -> List[Zone]:
    """
    Run every enabled detector over the bars.
    Output order: imbalances, order blocks, liquidity sweeps.
    """
    cfg = config or DetectionConfig()
    df = to_bar_frame(bars)

    zones = []
    if cfg.enable_imbalances:
        zones += detect_imbalances(df,
                                   strength_multiplier=cfg.fvg_strength_multiplier,
                                   epsilon=cfg.epsilon)
    if cfg.enable_order_blocks:
        zones += detect_order_blocks(df,
                                     bos_lookback=cfg.ob_lookback,
                                     volume_surge=cfg.ob_volume_surge,
                                     base_search=cfg.ob_base_search,
                                     fallback_strength=cfg.ob_fallback_strength,
                                     epsilon=cfg.epsilon)
    if cfg.enable_liquidity_sweeps:
        zones += detect_liquidity_sweeps(df,
                                         lookback=cfg.sweep_lookback,
                                         fallback_strength=cfg.sweep_fallback_strength,
                                         epsilon=cfg.epsilon)
    return zones


def mitigate(bars: Bars, zones: List[Zone]) -> List[Zone]:
    """Resolve mitigation for zones against the bars. Inputs are not modified."""
    return check_mitigation(to_bar_frame(bars), zones)


def analyze(bars: Bars, config: Optional[DetectionConfig] = None) -> List[Zone]:
    """Full pass: detect then mitigate over the same snapshot."""
    df = to_bar_frame(bars)
    zones = check_mitigation(df, detect(df, config))
    logger.debug(f"Analyzed {len(df)} bars: {len(zones)} zones")
    return zones
