# Data - bar frames, bar store and bar sources
from .bar_frame import to_bar_frame, BAR_COLUMNS
from .bar_store import BarStore
from .csv_loader import load_bars_csv, frame_to_bars
from .synthetic import generate_bars
