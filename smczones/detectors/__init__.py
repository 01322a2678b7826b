# SMC Detectors - Smart Money Concepts zone detection
from .fvg_detector import detect_imbalances
from .order_block import detect_order_blocks
from .liquidity_sweep import detect_liquidity_sweeps
from .mitigation import check_mitigation
