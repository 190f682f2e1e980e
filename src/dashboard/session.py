"""Dashboard session - drives the one-shot data load and owns the aggregator."""

import logging
from enum import Enum
from typing import Optional

from src.dashboard.acquisition import AcquisitionFailure, DataSupplier
from src.dashboard.aggregator import PerformanceAggregator
from src.dashboard.config import GENERIC_ERROR_MESSAGE

logger = logging.getLogger(__name__)


class AcquisitionState(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class DashboardSession:
    """Lifecycle of a single dashboard session.

    Starts in LOADING. :meth:`load` moves to READY once both collections
    have been supplied, or to ERROR with a generic message if either
    fails. Neither READY nor ERROR has an outgoing transition.
    """

    def __init__(self, supplier: DataSupplier):
        self.supplier = supplier
        self._state = AcquisitionState.LOADING
        self._error_message: Optional[str] = None
        self._aggregator: Optional[PerformanceAggregator] = None

    @property
    def state(self) -> AcquisitionState:
        return self._state

    @property
    def error_message(self) -> Optional[str]:
        """Generic user-facing message when in ERROR, else None."""
        return self._error_message

    @property
    def is_loading(self) -> bool:
        return self._state is AcquisitionState.LOADING

    @property
    def is_ready(self) -> bool:
        return self._state is AcquisitionState.READY

    @property
    def aggregator(self) -> PerformanceAggregator:
        """The loaded aggregator.

        Raises:
            RuntimeError: if the session is not READY.
        """
        if self._aggregator is None:
            raise RuntimeError(
                f"Dashboard data not available (state={self._state.value})"
            )
        return self._aggregator

    async def load(self) -> AcquisitionState:
        """Run the acquisition pass once and return the resulting state.

        Calling again after READY or ERROR performs no fetch.
        """
        if self._state is not AcquisitionState.LOADING:
            logger.debug("Load skipped; session already %s", self._state.value)
            return self._state

        try:
            dataset = await self.supplier.supply()
        except AcquisitionFailure as e:
            logger.error("Data acquisition failed: %s", e)
            self._error_message = GENERIC_ERROR_MESSAGE
            self._state = AcquisitionState.ERROR
            return self._state

        self._aggregator = PerformanceAggregator(dataset.squads, dataset.members)
        self._state = AcquisitionState.READY
        logger.info(
            "Dashboard ready: %d squads, %d members",
            len(dataset.squads), len(dataset.members),
        )
        return self._state
