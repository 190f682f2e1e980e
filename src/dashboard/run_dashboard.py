"""Load dashboard data and print it as text.

Usage:
    python -m src.dashboard.run_dashboard [squad|member] [api_base_url]

Examples:
    python -m src.dashboard.run_dashboard
    python -m src.dashboard.run_dashboard member
    python -m src.dashboard.run_dashboard squad http://localhost:3001

Without an API URL the built-in sample data is shown.
"""

import asyncio
import logging
import sys
from typing import Optional

from src.dashboard.acquisition import DataSupplier, RemoteSupplier, StaticSupplier
from src.dashboard.records import ViewMode
from src.dashboard.report import render_dashboard
from src.dashboard.session import AcquisitionState, DashboardSession
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


def run_dashboard(
    view_mode: ViewMode = ViewMode.SQUAD,
    api_base_url: Optional[str] = None,
) -> int:
    """Load data, print both list tabs, and return a process exit code."""
    supplier: DataSupplier
    if api_base_url:
        supplier = RemoteSupplier(api_base_url)
    else:
        supplier = StaticSupplier()

    session = DashboardSession(supplier)
    state = asyncio.run(session.load())

    if state is AcquisitionState.READY:
        session.aggregator.set_view_mode(view_mode)
        print(render_dashboard(session, tab="all"))
        print()
        print(render_dashboard(session, tab="top"))
        return 0

    print(render_dashboard(session))
    return 1


if __name__ == "__main__":
    setup_logging()

    mode = ViewMode(sys.argv[1]) if len(sys.argv) > 1 else ViewMode.SQUAD
    url = sys.argv[2] if len(sys.argv) > 2 else None

    try:
        sys.exit(run_dashboard(mode, url))
    except Exception:
        logger.exception("Dashboard failed")
        sys.exit(1)
