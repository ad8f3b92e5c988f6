# Sources module
from .interfaces import TraceSourceConnector
from .zipkin import ZipkinConnector, ZipkinConfig
from .utils import to_epoch_millis, calculate_lookback_millis

__all__ = [
    "TraceSourceConnector",
    "ZipkinConnector",
    "ZipkinConfig",
    "to_epoch_millis",
    "calculate_lookback_millis",
]
