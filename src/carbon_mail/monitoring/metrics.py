"""Custom Prometheus metrics for Carbon Mail.

These metrics are exposed at /metrics when PROMETHEUS_ENABLED is set.
Useful alerts:
- classifications_total{source="fallback"} (model calls failing, emails degraded to REVIEW)
- health_probes_total{available="false"} (local model service down)
"""

from prometheus_client import Counter, Histogram

# === Scan Metrics ===

scan_requests_total = Counter(
    "scan_requests_total",
    "Total POST /scan requests by outcome",
    ["status"],
)
"""
Scan outcome counter.

Labels:
- status: success, invalid_request, service_unavailable, no_model_installed, internal_error
"""

model_fallbacks_total = Counter(
    "model_fallbacks_total",
    "Scans where the requested model was replaced by the first installed model",
)

# === Classification Metrics ===

classifications_total = Counter(
    "classifications_total",
    "Classified emails by decision and source",
    ["decision", "source"],
)
"""
Classification counter.

Labels:
- decision: DELETE, KEEP, REVIEW
- source: llm (model answered), fallback (model call failed, degraded to REVIEW)
"""

# === LLM Performance Metrics ===

llm_latency_seconds = Histogram(
    "llm_latency_seconds",
    "Chat call latency in seconds",
    ["model", "success"],
    buckets=[0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0],
)

# === Health Metrics ===

health_probes_total = Counter(
    "health_probes_total",
    "Health probes of the local model service",
    ["available"],
)
