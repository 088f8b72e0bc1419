from .metrics import MetricsService, report_today

__all__ = [
    "MetricsService",
    "report_today",
]
