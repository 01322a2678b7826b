import logging
import pandas as pd
from typing import List
from ..models import Bar
from .bar_frame import BAR_COLUMNS

logger = logging.getLogger("SMCZones.Data")

# Broker/vendor spellings, first match wins and only when the standard name is absent
COLUMN_ALIASES = {
    'time': ['timestamp', 'datetime', 'date'],
    'volume': ['tick_volume', 'real_volume'],
}


def load_bars_csv(path: str) -> pd.DataFrame:
    """
    Loads OHLCV history from a CSV export into a bar frame.

    Column names are matched case-insensitively. Broker exports using
    'tick_volume' are accepted, a missing volume column becomes 0.
    When both 'volume' and 'tick_volume' are present, 'volume' is used.
    Datetime-like 'time' values are converted to epoch seconds.
    """
    df = pd.read_csv(path)
    df.columns = [str(c).strip().lower() for c in df.columns]

    # Rename columns to match standard conventions
    for column, aliases in COLUMN_ALIASES.items():
        if column in df.columns:
            continue
        for alias in aliases:
            if alias in df.columns:
                df.rename(columns={alias: column}, inplace=True)
                break

    # 'Volume' and 'volume' collapse to the same label after lowercasing
    df = df.loc[:, ~df.columns.duplicated()].copy()

    missing = [c for c in ['time', 'open', 'high', 'low', 'close'] if c not in df.columns]
    if missing:
        raise ValueError(f"CSV {path} is missing required columns: {missing}")

    if 'volume' not in df.columns:
        df['volume'] = 0.0

    if not pd.api.types.is_numeric_dtype(df['time']):
        epoch = pd.Timestamp('1970-01-01', tz='UTC')
        df['time'] = (pd.to_datetime(df['time'], utc=True) - epoch) // pd.Timedelta(seconds=1)

    df = df[BAR_COLUMNS].astype({'time': 'int64'})
    df = df.sort_values('time', kind='stable').drop_duplicates(subset='time', keep='last')

    logger.info(f"Loaded {len(df)} bars from {path}")
    return df.reset_index(drop=True)


def frame_to_bars(df: pd.DataFrame) -> List[Bar]:
    """Converts a bar frame into Bar objects (all final)."""
    return [
        Bar(
            time=int(row.time),
            open=float(row.open),
            high=float(row.high),
            low=float(row.low),
            close=float(row.close),
            volume=float(row.volume)
        )
        for row in df.itertuples(index=False)
    ]
