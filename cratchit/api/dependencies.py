"""
FastAPI dependencies shared by the routers.
"""

from fastapi import Depends, HTTPException

from cratchit.services.accounts_chart import AccountsChart
from cratchit.services.chart_source import ChartSource, get_chart_source


def get_chart(source: ChartSource = Depends(get_chart_source)) -> AccountsChart:
    """
    Provide the loaded chart to an endpoint.

    An unreadable or malformed chart file is a server-side
    problem, so it is reported as 503 rather than 400.
    """
    try:
        return source.get_chart()
    except (OSError, ValueError) as e:
        raise HTTPException(
            status_code=503, detail=f"Chart of accounts unavailable: {e}"
        )
