from src.dashboard.acquisition import (
    AcquisitionFailure,
    DataSupplier,
    Dataset,
    RemoteSupplier,
    StaticSupplier,
)
from src.dashboard.aggregator import PerformanceAggregator
from src.dashboard.records import (
    ChartPoint,
    ListEntry,
    MemberRecord,
    MetricRecord,
    RecordKind,
    SquadRecord,
    ViewMode,
)
from src.dashboard.session import AcquisitionState, DashboardSession

__all__ = [
    "AcquisitionFailure",
    "AcquisitionState",
    "ChartPoint",
    "DashboardSession",
    "DataSupplier",
    "Dataset",
    "ListEntry",
    "MemberRecord",
    "MetricRecord",
    "PerformanceAggregator",
    "RecordKind",
    "RemoteSupplier",
    "SquadRecord",
    "StaticSupplier",
    "ViewMode",
]
