# SMC Zones - Smart Money Concepts zone detection engine
from .models import Bar, Zone, ZoneKind, ZoneDirection, AdvisoryResult, Confidence
from .engine import DetectionConfig, detect, mitigate, analyze
