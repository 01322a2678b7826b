"""
SMC Zones - Data Models
OHLCV bars, detected zones and the advisory result boundary type.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ZoneKind(Enum):
    IMBALANCE = "FVG"
    ORDER_BLOCK = "Order Block"
    LIQUIDITY_SWEEP = "Liquidity Sweep"


class ZoneDirection(Enum):
    BULLISH = "BULLISH"
    BEARISH = "BEARISH"


class Confidence(Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


@dataclass
class Bar:
    """One OHLCV period. time is seconds since epoch."""
    time: int
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0
    is_final: bool = True  # False while the period is still forming


@dataclass
class Zone:
    """Detected smart-money zone."""
    id: str
    kind: ZoneKind
    direction: ZoneDirection
    top: float               # Upper boundary
    bottom: float            # Lower boundary
    start_time: int          # Bar time the zone exists from
    strength_score: float
    origin_index: int        # Index of the bar that produced the zone
    end_time: Optional[int] = None  # Time of the mitigating bar
    is_mitigated: bool = False

    @property
    def equilibrium(self) -> float:
        """50% level of the zone."""
        return (self.top + self.bottom) / 2

    @property
    def size(self) -> float:
        return self.top - self.bottom

    @property
    def is_bullish(self) -> bool:
        return self.direction == ZoneDirection.BULLISH


@dataclass
class AdvisoryResult:
    """
    Narrative validation returned by the external AI advisory for one zone.

    The advisory client lives outside this package. from_dict parses its JSON
    payload and neutral() is the answer to use when the call fails.
    """
    score: float             # 0-1
    reasoning: str
    confidence: Confidence
    suggestion: str

    @classmethod
    def from_dict(cls, data: dict) -> "AdvisoryResult":
        """
        Build from the advisory JSON payload.
        Score is clamped to 0-1, unknown confidence labels fall back to LOW.
        """
        score = min(1.0, max(0.0, float(data.get('score', 0.5))))
        try:
            confidence = Confidence(str(data.get('confidence', 'LOW')).upper())
        except ValueError:
            confidence = Confidence.LOW
        return cls(
            score=score,
            reasoning=data.get('reasoning', ''),
            confidence=confidence,
            suggestion=data.get('suggestion', '')
        )

    @classmethod
    def neutral(cls) -> "AdvisoryResult":
        """Baseline answer used when the advisory service cannot be reached."""
        return cls(
            score=0.5,
            reasoning="Advisory unavailable. Defaulting to baseline structure analysis.",
            confidence=Confidence.LOW,
            suggestion="Wait for order flow confirmation."
        )
