"""Performance data aggregator - view selection, ranking and chart projections."""

import logging
from typing import Dict, List, Sequence, Tuple, Union

import pandas as pd

from src.dashboard.config import CHART_METRICS, DEFAULT_TOP_N
from src.dashboard.records import (
    AnyRecord,
    ChartPoint,
    ListEntry,
    MemberRecord,
    RecordKind,
    SquadRecord,
    ViewMode,
)

logger = logging.getLogger(__name__)

_FRAME_COLUMNS = ["key", "name", "squad", *CHART_METRICS]


class PerformanceAggregator:
    """Holds the squad and member snapshots and derives read-only views.

    Both collections are stored as tuples and never reordered; every
    projection works on a copy.
    """

    def __init__(
        self,
        squads: Sequence[SquadRecord],
        members: Sequence[MemberRecord],
        view_mode: ViewMode = ViewMode.SQUAD,
    ):
        self._squads = self._checked(squads, SquadRecord, "squads")
        self._members = self._checked(members, MemberRecord, "members")
        self._view_mode = ViewMode(view_mode)

    @staticmethod
    def _checked(records, record_type, label) -> Tuple:
        records = tuple(records)
        for index, record in enumerate(records):
            if not isinstance(record, record_type):
                raise TypeError(
                    f"{label}[{index}] must be {record_type.__name__}, "
                    f"got {type(record).__name__}"
                )
        return records

    # ------------------------------------------------------------------
    # View selection
    # ------------------------------------------------------------------
    @property
    def view_mode(self) -> ViewMode:
        return self._view_mode

    def set_view_mode(self, mode: Union[ViewMode, str]) -> None:
        """Select which collection is current.

        Raises:
            ValueError: if *mode* is a string that names no view mode.
        """
        self._view_mode = ViewMode(mode)
        logger.debug("View mode set to %s", self._view_mode.value)

    def toggle_view_mode(self) -> ViewMode:
        """Flip between squad and member views, returning the new mode."""
        if self._view_mode is ViewMode.SQUAD:
            self.set_view_mode(ViewMode.MEMBER)
        else:
            self.set_view_mode(ViewMode.SQUAD)
        return self._view_mode

    @property
    def squads(self) -> Tuple[SquadRecord, ...]:
        return self._squads

    @property
    def members(self) -> Tuple[MemberRecord, ...]:
        return self._members

    def current_collection(self) -> Tuple[AnyRecord, ...]:
        """Squads in squad view, members in member view."""
        if self._view_mode is ViewMode.SQUAD:
            return self._squads
        return self._members

    def count(self) -> int:
        return len(self.current_collection())

    # ------------------------------------------------------------------
    # Ranking
    # ------------------------------------------------------------------
    def top_performers(self, n: int = DEFAULT_TOP_N) -> List[AnyRecord]:
        """Best *n* records of the current view by descending performance.

        Ties keep their original order. The current collection is left
        untouched.

        Raises:
            ValueError: if *n* is negative.
        """
        return [entry.record for entry in self.top_entries(n)]

    def list_entries(self) -> List[ListEntry]:
        """Keyed entries for the "All" list, in collection order."""
        return [
            ListEntry.create(index, record)
            for index, record in enumerate(self.current_collection())
        ]

    def top_entries(self, n: int = DEFAULT_TOP_N) -> List[ListEntry]:
        """Keyed entries for the "Top Performers" list.

        Keys match those of :meth:`list_entries` for the same record.
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        # sorted() returns a new list and is stable under reverse=True
        ranked = sorted(
            self.list_entries(),
            key=lambda entry: entry.record.performance,
            reverse=True,
        )
        return ranked[:n]

    # ------------------------------------------------------------------
    # Chart projections
    # ------------------------------------------------------------------
    def chart_series(self) -> List[ChartPoint]:
        """One chart point per record of the current view, in order."""
        return [
            ChartPoint(
                label=record.name,
                performance=record.performance,
                efficiency=record.efficiency,
                quality=record.quality,
            )
            for record in self.current_collection()
        ]

    def metrics_frame(self) -> pd.DataFrame:
        """Current view as a DataFrame.

        Columns: key, name, squad, performance, efficiency, quality.
        ``squad`` is empty for squad records.
        """
        rows = []
        for entry in self.list_entries():
            record = entry.record
            rows.append({
                "key": entry.key,
                "name": record.name,
                "squad": record.squad if record.kind is RecordKind.MEMBER else "",
                "performance": record.performance,
                "efficiency": record.efficiency,
                "quality": record.quality,
            })
        return pd.DataFrame(rows, columns=_FRAME_COLUMNS)

    def average_scores(self) -> Dict[str, float]:
        """Mean of each metric over the current view ({} when empty)."""
        df = self.metrics_frame()
        if df.empty:
            return {}
        means = df[list(CHART_METRICS)].mean()
        return {metric: float(means[metric]) for metric in CHART_METRICS}

    def squad_rollup(self) -> pd.DataFrame:
        """Members grouped by squad name, best mean performance first.

        Returns DataFrame with columns:
            squad, members, performance, efficiency, quality
        where the metric columns are per-squad means. Squad names are
        taken from the member records and are not checked against the
        squad collection.
        """
        columns = ["squad", "members", *CHART_METRICS]
        if not self._members:
            return pd.DataFrame(columns=columns)

        df = pd.DataFrame([
            {"squad": m.squad, **dict(zip(CHART_METRICS, m.metrics()))}
            for m in self._members
        ])
        grouped = df.groupby("squad", sort=False)
        rollup = grouped[list(CHART_METRICS)].mean()
        rollup.insert(0, "members", grouped.size())
        rollup = (
            rollup.reset_index()
            .sort_values("performance", ascending=False, kind="stable")
            .reset_index(drop=True)
        )

        logger.debug(
            "Rolled up %d members into %d squads", len(self._members), len(rollup)
        )
        return rollup[columns]

