"""
Bar Store
Bounded, time-ordered buffer of the most recent OHLCV bars.
"""
import logging
import pandas as pd
from collections import deque
from dataclasses import asdict
from typing import Iterable, List, Optional
from ..models import Bar
from .bar_frame import BAR_COLUMNS

logger = logging.getLogger("SMCZones.Store")


class BarStore:
    """
    Ring buffer of bars keyed by time.

    - A bar newer than the last one is appended.
    - A bar with the same time as a stored bar replaces it (in-progress revision).
    - Anything else is out of order and ignored.
    Oldest bars fall off once capacity is reached.
    """

    def __init__(self, capacity: int = 500):
        if capacity <= 0:
            raise ValueError(f"Capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._bars = deque(maxlen=capacity)

    def update(self, bar: Bar) -> bool:
        """
        Append or revise a bar. Returns True if the store changed.
        """
        last = self.last
        if last is None or bar.time > last.time:
            self._bars.append(bar)
            return True

        if bar.time == last.time:
            self._bars[-1] = bar
            return True

        # Revision of an older bar still in the buffer
        for idx in range(len(self._bars) - 2, -1, -1):
            stored = self._bars[idx]
            if stored.time == bar.time:
                self._bars[idx] = bar
                return True
            if stored.time < bar.time:
                break

        logger.warning(f"Ignoring out-of-order bar at {bar.time} (last stored: {last.time})")
        return False

    def extend(self, bars: Iterable[Bar]) -> int:
        """Backfill with historical bars. Returns the number accepted."""
        return sum(1 for bar in bars if self.update(bar))

    @property
    def last(self) -> Optional[Bar]:
        return self._bars[-1] if self._bars else None

    def bars(self) -> List[Bar]:
        return list(self._bars)

    def to_frame(self) -> pd.DataFrame:
        """Snapshot of the stored bars as a bar frame."""
        records = [asdict(bar) for bar in self._bars]
        return pd.DataFrame(records, columns=BAR_COLUMNS + ['is_final'])[BAR_COLUMNS]

    def clear(self):
        self._bars.clear()

    def __len__(self) -> int:
        return len(self._bars)
