# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics. Every metric object is defined here.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "facelist_requests_total",
    "Total HTTP requests to facelist",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "facelist_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "facelist_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Directory Metrics (updated by service layer only) ──
DIRECTORY_FETCHES = Counter(
    "facelist_directory_fetches_total",
    "Slack users.list calls by outcome",
    ["outcome"],
)
MEMBERS_RENDERED = Gauge(
    "facelist_members_rendered",
    "Members shown on the last rendered page",
)
RENDER_FAILURES = Counter(
    "facelist_render_failures_total",
    "Template rendering failures",
)
