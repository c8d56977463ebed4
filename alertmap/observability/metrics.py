"""
Metrics definitions for alert-map.

This module defines Prometheus metrics for monitoring alert
retrieval and geometry derivation.
"""

from prometheus_client import Counter, Histogram

# 카운터 메트릭
alerts_fetched = Counter(
    "alerts_fetched_total",
    "Number of alerts returned by the archive"
)

alert_fetch_failures = Counter(
    "alert_fetch_failures_total",
    "Number of archive requests that failed after retries"
)

markers_derived = Counter(
    "markers_derived_total",
    "Number of map markers derived from alerts"
)

viewport_filtered = Counter(
    "viewport_filtered_total",
    "Number of alerts removed by viewport filtering"
)

# 히스토그램 메트릭
fetch_seconds = Histogram(
    "fetch_duration_seconds",
    "Time spent retrieving alerts from the archive",
    buckets=[0.1, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0]
)

derive_seconds = Histogram(
    "derive_duration_seconds",
    "Time spent deriving markers and boundaries",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0]
)
