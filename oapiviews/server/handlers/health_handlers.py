"""
Health and metrics handlers.
"""

import logging
import time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from aiohttp import web

logger = logging.getLogger("oapiviews.server.handlers.health")


# Metrics storage (simple in-memory counters)
_metrics: dict[str, Any] = {
    "views_served_total": 0,
    "views_by_audience": {},
    "views_not_found_total": 0,
    "start_time": time.time(),
}


def record_view(audience: str) -> None:
    """Record a successfully served view."""
    _metrics["views_served_total"] += 1
    by_audience = _metrics["views_by_audience"]
    by_audience[audience] = by_audience.get(audience, 0) + 1


def record_not_found() -> None:
    """Record a view request that ended in not-found."""
    _metrics["views_not_found_total"] += 1


async def health_check(request: "web.Request") -> "web.Response":
    """
    Health check endpoint.

    Returns:
        JSON response with status "healthy".
    """
    from aiohttp import web

    return web.json_response({
        "status": "healthy",
        "timestamp": time.time(),
    })


async def metrics(request: "web.Request") -> "web.Response":
    """
    Prometheus-format metrics endpoint.

    Returns:
        Text response with Prometheus metrics.
    """
    from aiohttp import web

    uptime = time.time() - _metrics["start_time"]

    lines = [
        "# HELP oapiviews_up oapiviews server is up",
        "# TYPE oapiviews_up gauge",
        "oapiviews_up 1",
        "",
        "# HELP oapiviews_uptime_seconds Server uptime in seconds",
        "# TYPE oapiviews_uptime_seconds counter",
        f"oapiviews_uptime_seconds {uptime:.2f}",
        "",
        "# HELP oapiviews_views_served_total Views served",
        "# TYPE oapiviews_views_served_total counter",
        f"oapiviews_views_served_total {_metrics['views_served_total']}",
        "",
        "# HELP oapiviews_views_by_audience Views served by audience",
        "# TYPE oapiviews_views_by_audience counter",
    ]

    for audience, count in _metrics["views_by_audience"].items():
        lines.append(f'oapiviews_views_by_audience{{audience="{audience}"}} {count}')

    lines.extend([
        "",
        "# HELP oapiviews_views_not_found_total View requests answered with not found",
        "# TYPE oapiviews_views_not_found_total counter",
        f"oapiviews_views_not_found_total {_metrics['views_not_found_total']}",
        "",
    ])

    response = web.Response(
        body="\n".join(lines).encode("utf-8"),
    )
    response.headers["Content-Type"] = "text/plain; version=0.0.4; charset=utf-8"
    return response
