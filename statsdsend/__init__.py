from .config import client_from_config
from .statsd import send_decrement, send_gauge, send_increment, send_timing, StatsClient
from .transport import send_raw, send_raw_many

__version__ = "1.0.0"

__all__ = [
    "client_from_config",
    "send_decrement",
    "send_gauge",
    "send_increment",
    "send_raw",
    "send_raw_many",
    "send_timing",
    "StatsClient",
]
