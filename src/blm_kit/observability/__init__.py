# src/blm_kit/observability/__init__.py

from . import names
from .base import MetricsHook, NoOpMetricsHook

__all__ = [
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
]
