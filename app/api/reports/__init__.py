from .metrics import router as metrics_report_router

__all__ = [
    "metrics_report_router",
]
