from .metrics_queries import (
    build_hiring_process_query,
    fetch_hiring_processes,
    parse_filter_date,
)

__all__ = [
    "build_hiring_process_query",
    "fetch_hiring_processes",
    "parse_filter_date",
]
