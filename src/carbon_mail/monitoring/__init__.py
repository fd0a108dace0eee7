"""Monitoring and metrics instrumentation for Carbon Mail.

Exports custom Prometheus metrics for operational monitoring and alerting.
"""

from carbon_mail.monitoring.metrics import (
    classifications_total,
    health_probes_total,
    llm_latency_seconds,
    model_fallbacks_total,
    scan_requests_total,
)

__all__ = [
    "scan_requests_total",
    "model_fallbacks_total",
    "classifications_total",
    "llm_latency_seconds",
    "health_probes_total",
]
