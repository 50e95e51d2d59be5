from .api import create_app
from .cache import CacheGateway
from .scoring import StatsAggregator
from .schemas import PerformanceSnapshot

__all__ = [
    "create_app",
    "CacheGateway",
    "StatsAggregator",
    "PerformanceSnapshot",
]
