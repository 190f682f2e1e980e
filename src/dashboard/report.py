"""Plain-text rendering of a dashboard session."""

from typing import List

from src.dashboard.config import CHART_METRICS, DASHBOARD_TITLE, DEFAULT_TOP_N
from src.dashboard.records import ListEntry, RecordKind, ViewMode
from src.dashboard.session import AcquisitionState, DashboardSession

TABS = ("all", "top")


def _format_entry(entry: ListEntry) -> str:
    record = entry.record
    line = f"  {record.name}"
    if record.kind is RecordKind.MEMBER:
        line += f" ({record.squad})"
    return f"{line:<28} Perf: {record.performance:<6} Eff: {record.efficiency}"


def render_dashboard(
    session: DashboardSession, tab: str = "all", top_n: int = DEFAULT_TOP_N
) -> str:
    """Render *session* as text.

    Args:
        session: The dashboard session to render.
        tab: ``"all"`` for every record or ``"top"`` for top performers.
        top_n: Length of the top performers list.

    Raises:
        ValueError: if *tab* is not a known tab.
    """
    if tab not in TABS:
        raise ValueError(f"Unknown tab {tab!r}; expected one of {TABS}")

    if session.state is AcquisitionState.LOADING:
        return "Loading..."
    if session.state is AcquisitionState.ERROR:
        return f"Error: {session.error_message}"

    aggregator = session.aggregator
    mode = aggregator.view_mode.label

    lines: List[str] = [
        DASHBOARD_TITLE,
        "=" * len(DASHBOARD_TITLE),
        f"View by {mode}",
        f"Total: {aggregator.count()}",
        "",
        "Performance Overview",
    ]

    frame = aggregator.metrics_frame()
    if frame.empty:
        lines.append("  (no data)")
    else:
        table = frame.set_index("name")[list(CHART_METRICS)]
        lines.append(table.to_string())
        averages = aggregator.average_scores()
        lines.append(
            "Mean: " + ", ".join(f"{m} {averages[m]:.2f}" for m in CHART_METRICS)
        )

    if aggregator.view_mode is ViewMode.MEMBER and aggregator.members:
        lines.append("")
        lines.append("By Squad")
        lines.append(aggregator.squad_rollup().to_string(index=False))

    lines.append("")
    if tab == "all":
        lines.append(f"{mode} List - All")
        entries = aggregator.list_entries()
    else:
        lines.append(f"{mode} List - Top Performers")
        entries = aggregator.top_entries(top_n)
    lines.extend(_format_entry(entry) for entry in entries)

    return "\n".join(lines)
