import json
import logging
import pandas as pd
from pathlib import Path
from typing import List
from ..models import Zone

logger = logging.getLogger("SMCZones.Export")

ZONE_COLUMNS = [
    "id", "kind", "direction", "top", "bottom", "equilibrium",
    "start_time", "end_time", "strength_score", "is_mitigated", "origin_index"
]


def zone_to_dict(zone: Zone) -> dict:
    """Flat, JSON-friendly view of a zone for the rendering layer."""
    return {
        "id": zone.id,
        "kind": zone.kind.value,
        "direction": zone.direction.value,
        "top": zone.top,
        "bottom": zone.bottom,
        "equilibrium": zone.equilibrium,
        "start_time": zone.start_time,
        "end_time": zone.end_time,
        "strength_score": round(zone.strength_score, 4),
        "is_mitigated": zone.is_mitigated,
        "origin_index": zone.origin_index,
    }


def zones_to_frame(zones: List[Zone]) -> pd.DataFrame:
    return pd.DataFrame([zone_to_dict(z) for z in zones], columns=ZONE_COLUMNS)


def export_zones(zones: List[Zone], path: str):
    """
    Writes zones to .csv or .json, chosen by the file suffix.
    """
    suffix = Path(path).suffix.lower()

    if suffix == ".csv":
        zones_to_frame(zones).to_csv(path, index=False)
    elif suffix == ".json":
        with open(path, "w") as f:
            json.dump([zone_to_dict(z) for z in zones], f, indent=4)
    else:
        raise ValueError(f"Unsupported export format: {suffix or path}")

    logger.info(f"Exported {len(zones)} zones to {path}")
