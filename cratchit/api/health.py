"""
Health check endpoint.

Used by load balancers, monitoring systems, and humans
to verify the application is running and responsive.
"""

from fastapi import APIRouter, Depends

from cratchit.services.chart_source import ChartSource, get_chart_source

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check(source: ChartSource = Depends(get_chart_source)):
    """
    Return application health status including chart availability.

    The check loads the configured chart document. If that
    fails the service still answers, but reports itself as
    degraded.
    """
    try:
        source.get_chart()
        chart_status = "healthy"
    except (OSError, ValueError):
        chart_status = "unhealthy"

    return {
        "status": "healthy" if chart_status == "healthy" else "degraded",
        "service": "cratchit",
        "chart": chart_status,
    }
