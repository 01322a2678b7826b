import json
import os
import sys
import pandas as pd
import pytest

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from smczones.utils.export import export_zones, zones_to_frame, ZONE_COLUMNS
from smczones.models import Zone, ZoneKind, ZoneDirection


def create_zones():
    return [
        Zone(id="fvg-bull-2", kind=ZoneKind.IMBALANCE, direction=ZoneDirection.BULLISH,
             top=13.0, bottom=10.0, start_time=60, strength_score=10.0, origin_index=2,
             end_time=120, is_mitigated=True),
        Zone(id="sweep-high-30", kind=ZoneKind.LIQUIDITY_SWEEP, direction=ZoneDirection.BEARISH,
             top=103.0, bottom=101.0, start_time=1800, strength_score=2.857142857, origin_index=30),
    ]


def test_zones_to_frame():
    df = zones_to_frame(create_zones())

    assert list(df.columns) == ZONE_COLUMNS
    assert df['kind'].tolist() == ["FVG", "Liquidity Sweep"]
    assert df['equilibrium'].tolist() == [11.5, 102.0]


def test_empty_frame_keeps_columns():
    assert list(zones_to_frame([]).columns) == ZONE_COLUMNS


def test_export_json(tmp_path):
    path = tmp_path / "zones.json"
    export_zones(create_zones(), str(path))

    data = json.loads(path.read_text())
    assert data[0]['id'] == "fvg-bull-2"
    assert data[0]['end_time'] == 120
    assert data[1]['end_time'] is None
    assert data[1]['direction'] == "BEARISH"
    assert data[1]['strength_score'] == 2.8571


def test_export_csv(tmp_path):
    path = tmp_path / "zones.csv"
    export_zones(create_zones(), str(path))

    df = pd.read_csv(path)
    assert df['id'].tolist() == ["fvg-bull-2", "sweep-high-30"]
    assert df['is_mitigated'].tolist() == [True, False]


def test_unsupported_format(tmp_path):
    with pytest.raises(ValueError, match="Unsupported"):
        export_zones(create_zones(), str(tmp_path / "zones.xlsx"))
