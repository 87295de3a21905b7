"""Prometheus metrics for derivation and override passes."""

from prometheus_client import Counter, Histogram

derivations_total = Counter(
    "derivations_total",
    "Total derivation passes",
    ["view"],
)

derivation_latency_ms = Histogram(
    "derivation_latency_ms",
    "Derivation latency in milliseconds",
    ["view"],
    buckets=[0.5, 1, 2, 5, 10, 25, 50, 100, 250],
)

override_edits_total = Counter(
    "override_edits_total",
    "Total override edits applied",
    ["layer", "op"],
)


class PrometheusDerivationMetrics:
    """Prometheus-based derivation metrics implementation."""

    def record_derivation(self, view: str, latency_ms: float) -> None:
        """Count a derivation pass and record its latency."""
        derivations_total.labels(view=view).inc()
        derivation_latency_ms.labels(view=view).observe(latency_ms)

    def inc_edit(self, layer: str, op: str) -> None:
        """Increment override edit counter."""
        override_edits_total.labels(layer=layer, op=op).inc()
