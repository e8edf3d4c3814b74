"""Prometheus metrics for the encoder, the QR renderer and the HTTP layer."""
from __future__ import annotations

import time
from contextlib import AbstractContextManager, contextmanager
from typing import Final, Iterator

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

from .errors import PixError

# Encoding is sub-millisecond; QR rendering plus PNG compression lands in the low milliseconds.
_ENCODE_BUCKETS: Final = (0.00005, 0.0001, 0.00025, 0.0005, 0.001, 0.0025, 0.01)
_RENDER_BUCKETS: Final = (0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25)

_HTTP_REQUEST_TOTAL: Final = Counter(
    "pixcode_http_requests_total",
    "HTTP requests by route and status",
    labelnames=("method", "route", "status"),
)
_HTTP_REQUEST_LATENCY: Final = Histogram(
    "pixcode_http_request_duration_seconds",
    "End-to-end HTTP request latency",
    labelnames=("route",),
    buckets=_RENDER_BUCKETS,
)
_SERVICE_ERRORS_TOTAL: Final = Counter(
    "pixcode_service_errors_total",
    "Errors returned to HTTP clients by error code",
    labelnames=("code", "route"),
)
_ENCODE_TOTAL: Final = Counter(
    "pixcode_encode_total",
    "BR Code encode attempts; outcome is 'ok' or the error code",
    labelnames=("outcome",),
)
_ENCODE_LATENCY: Final = Histogram(
    "pixcode_encode_duration_seconds",
    "Time spent validating, serializing and checksumming a payload",
    buckets=_ENCODE_BUCKETS,
)
_RENDER_TOTAL: Final = Counter(
    "pixcode_qr_render_total",
    "QR image renders; outcome is 'ok' or the error code",
    labelnames=("outcome",),
)
_RENDER_LATENCY: Final = Histogram(
    "pixcode_qr_render_duration_seconds",
    "Time spent building and PNG-encoding a QR image",
    buckets=_RENDER_BUCKETS,
)


def observe_request(method: str, route: str, status_code: int, duration_ms: float) -> None:
    _HTTP_REQUEST_TOTAL.labels(method=method, route=route, status=str(status_code)).inc()
    _HTTP_REQUEST_LATENCY.labels(route=route).observe(duration_ms / 1000)


def record_service_error(code: str, route: str) -> None:
    _SERVICE_ERRORS_TOTAL.labels(code=code, route=route).inc()


@contextmanager
def _track(total: Counter, latency: Histogram) -> Iterator[None]:
    start = time.perf_counter()
    try:
        yield
    except PixError as exc:
        total.labels(outcome=exc.code).inc()
        raise
    latency.observe(time.perf_counter() - start)
    total.labels(outcome="ok").inc()


def track_encode() -> AbstractContextManager[None]:
    """Count one encode by outcome and time it when it succeeds."""

    return _track(_ENCODE_TOTAL, _ENCODE_LATENCY)


def track_render() -> AbstractContextManager[None]:
    return _track(_RENDER_TOTAL, _RENDER_LATENCY)


def metrics_payload() -> tuple[bytes, str]:
    """Return Prometheus exposition payload and content type."""

    return generate_latest(), CONTENT_TYPE_LATEST
