"""Prometheus metrics for FullContact client calls.

Metrics register on the default prometheus_client registry; expose them with
whatever exporter the embedding application already runs.
Useful alerts:
- fullcontact_retries_total (rising retry rate means throttling or outages)
- fullcontact_requests_total{outcome="error"} (transport or decode failures)
"""

from prometheus_client import Counter, Histogram

# === Call Metrics ===

requests_total = Counter(
    "fullcontact_requests_total",
    "Total FullContact calls by request kind and terminal outcome",
    ["kind", "outcome"],
)
"""
Terminal outcomes by kind.

Labels:
- kind: person.enrich, company.enrich, company.search, identity.map, ...
- outcome: success (business success, includes 404), failure (other status),
  error (validation, transport or deserialization error)
"""

retries_total = Counter(
    "fullcontact_retries_total",
    "Total retry attempts by request kind and reason",
    ["kind", "reason"],
)
"""
Retry attempts by kind.

Labels:
- reason: status (retryable HTTP status), transport (no response received)
"""

request_latency_seconds = Histogram(
    "fullcontact_request_latency_seconds",
    "End-to-end call latency including retries and backoff",
    ["kind"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0],
)
