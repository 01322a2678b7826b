import pandas as pd
from dataclasses import asdict
from typing import Iterable, Union
from ..models import Bar

BAR_COLUMNS = ['time', 'open', 'high', 'low', 'close', 'volume']


def to_bar_frame(bars: Union[pd.DataFrame, Iterable[Bar]]) -> pd.DataFrame:
    """
    Normalise bars to the frame every detector reads:
    columns [time, open, high, low, close, volume] with a 0..n-1 index.

    Accepts a DataFrame or any iterable of Bar objects. Always returns a new
    frame, the caller's data is never modified.
    """
    if isinstance(bars, pd.DataFrame):
        df = bars.copy()
        if 'volume' not in df.columns:
            df['volume'] = 0.0
        df = df[BAR_COLUMNS]
    else:
        records = [asdict(bar) for bar in bars]
        df = pd.DataFrame(records, columns=BAR_COLUMNS + ['is_final'])[BAR_COLUMNS]

    return df.reset_index(drop=True)
