"""Exception hierarchy for the metrics service."""

from __future__ import annotations

from typing import List


class MetricsError(Exception):
    """Base exception for all metrics errors."""


class InvalidFilterError(MetricsError):
    """Raised when a request filter cannot be turned into a query."""


class MetricsQueryError(MetricsError):
    """Raised when the hiring process rows cannot be retrieved."""


class AggregationError(MetricsError):
    """Raised when a single derivation cannot be computed from the fetched rows."""


class MetricsAggregationError(MetricsError):
    """Raised when one or more derivations failed; carries every failure."""

    def __init__(self, errors: List[Exception]):
        self.errors = list(errors)
        details = "; ".join(str(err) for err in self.errors)
        super().__init__(f"failed to get metrics: [{details}]")
