# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "roster_requests_total",
    "Total HTTP requests to the team roster service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "roster_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "roster_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
ENTITIES_CREATED = Counter(
    "roster_entities_created_total",
    "Total roster entities created",
    ["kind"],
)
ENTITIES_UPDATED = Counter(
    "roster_entities_updated_total",
    "Total roster entities updated",
    ["kind"],
)
ENTITIES_DELETED = Counter(
    "roster_entities_deleted_total",
    "Total roster entities deleted",
    ["kind"],
)
ROSTER_SIZE = Gauge(
    "roster_entities",
    "Number of roster entities currently stored",
    ["kind"],
)
CALENDAR_PROJECTIONS = Counter(
    "roster_calendar_projections_total",
    "Total calendar grids computed",
    ["mode"],
)
AT_RISK_DAYS = Histogram(
    "roster_calendar_at_risk_days",
    "At-risk days per computed calendar grid",
    buckets=[0, 1, 2, 5, 10, 20, 42],
)
STORE_WRITES = Counter(
    "roster_store_writes_total",
    "Total writes of the roster document to the key-value store",
    ["status"],
)
STORE_DOCUMENT_BYTES = Gauge(
    "roster_store_document_bytes",
    "Size of the persisted roster document in bytes",
)
