import logging
from typing import Iterable, List, Optional
from .models import Bar, Zone
from .data.bar_store import BarStore
from .engine import DetectionConfig, analyze

logger = logging.getLogger("SMCZones.Scanner")


class ZoneScanner:
    """
    Receiving end of a bar feed.

    Keeps the most recent bars in a BarStore and recomputes the full zone set
    from scratch whenever a bar closes. Partial (in-progress) bars update the
    store and only trigger a rescan when analyze_partial_bars is enabled.
    """

    def __init__(self, config: Optional[dict] = None):
        config = config or {}
        self.config = config
        self.detection = DetectionConfig.from_config(config)
        self.store = BarStore(capacity=(config.get('store') or {}).get('capacity', 500))
        self.analyze_partial_bars = (config.get('scanner') or {}).get('analyze_partial_bars', False)
        self.zones: List[Zone] = []

    def load_history(self, bars: Iterable[Bar]) -> List[Zone]:
        """Backfill the store with historical bars and run a full scan."""
        accepted = self.store.extend(bars)
        logger.info(f"Loaded {accepted} historical bars ({len(self.store)} in store)")
        return self.rescan()

    def on_bar(self, bar: Bar) -> List[Zone]:
        """
        Feed one bar update. Returns the current zone set.
        """
        if not self.store.update(bar):
            return self.zones

        if bar.is_final or self.analyze_partial_bars:
            return self.rescan()
        return self.zones

    def rescan(self) -> List[Zone]:
        """Recompute all zones over the current store snapshot."""
        previous = {z.id: z for z in self.zones}
        self.zones = analyze(self.store.to_frame(), self.detection)

        for zone in self.zones:
            before = previous.get(zone.id)
            if before is None:
                status = f", already mitigated at {zone.end_time}" if zone.is_mitigated else ""
                logger.info(f"New {zone.direction.value} {zone.kind.value} zone {zone.id}: "
                            f"{zone.bottom:.5f}-{zone.top:.5f} (strength {zone.strength_score:.1f}{status})")
            elif zone.is_mitigated and not before.is_mitigated:
                logger.info(f"Zone {zone.id} mitigated at {zone.end_time}")

        logger.debug(f"Rescan over {len(self.store)} bars: {len(self.zones)} zones, "
                     f"{len(self.active_zones())} active")
        return self.zones

    def active_zones(self) -> List[Zone]:
        """Zones price has not yet returned into."""
        return [z for z in self.zones if not z.is_mitigated]
