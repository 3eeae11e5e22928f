"""Chart parsing and loading services."""

from cratchit.services.accounts_chart import AccountsChart, MalformedDocument
from cratchit.services.chart_source import ChartSource, get_chart_source

__all__ = ["AccountsChart", "MalformedDocument", "ChartSource", "get_chart_source"]
