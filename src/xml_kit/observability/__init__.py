"""Metrics hooks for xml-kit.

Every parser takes an optional ``metrics_hook``; the default drops all
measurements. Metric names live in :mod:`xml_kit.observability.names`.
"""

from . import names
from .base import MetricsHook, NoOpMetricsHook

__all__ = [
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
]
