from . import processing
from .reports import MetricsService

__all__ = ["processing", "MetricsService"]
