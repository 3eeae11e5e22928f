"""
Chart source: reads the configured chart document from disk.

Reading the file is the only I/O in the system. The chart is
built once on first use, under a lock, and reused for every
later request.
"""

import json
import logging
import threading
from functools import lru_cache
from pathlib import Path

from cratchit.config import get_settings
from cratchit.services.accounts_chart import AccountsChart

logger = logging.getLogger(__name__)


class ChartSource:

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._chart: AccountsChart | None = None
        self._lock = threading.Lock()

    def read_document(self) -> dict:
        """Read and decode the JSON document at self.path."""
        with self.path.open(encoding="utf-8") as f:
            return json.load(f)

    def get_chart(self) -> AccountsChart:
        """
        Return the chart, building it on the first call.

        Raises OSError if the file cannot be read and ValueError
        (MalformedDocument or JSONDecodeError) if it does not hold
        a valid chart. A failed load is retried on the next call.
        """
        # Sync endpoints run in a threadpool; only one thread builds
        with self._lock:
            if self._chart is None:
                logger.info("Loading chart of accounts from %s", self.path)
                try:
                    self._chart = AccountsChart(self.read_document())
                except (OSError, ValueError):
                    logger.exception("Could not load chart from %s", self.path)
                    raise
            return self._chart


@lru_cache()
def get_chart_source() -> ChartSource:
    """Return the process-wide source for Settings.CHART_PATH."""
    return ChartSource(get_settings().CHART_PATH)
