"""
Prometheus metrics for the booking rule engine.
Exposed at the /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

booking_operations = Counter(
    'booking_operations_total',
    'Booking operations by outcome',
    ['operation', 'outcome']  # get/create/update; success, not_found or a denial reason
)

booking_latency = Histogram(
    'booking_operation_latency_seconds',
    'Booking rule engine latency',
    ['operation'],
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)


def metrics_endpoint() -> Response:
    """Render every registered metric in the Prometheus text format."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_booking_operation(operation: str, outcome: str):
    booking_operations.labels(operation=operation, outcome=outcome).inc()
