from .reports import metrics_report_router

__all__ = [
    "metrics_report_router",
]
