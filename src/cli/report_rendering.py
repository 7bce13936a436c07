"""Plain-text rendering of reports for CLI output."""

from __future__ import annotations

from core.types import MetricSeries
from export.csv_serializer import format_cell
from reports.immigration_report import ImmigrationView
from reports.mobility_report import MobilityReport


def render_immigration_view(view: ImmigrationView) -> str:
    """Render the latest breakdown and the selected trend."""
    if view.latest_period is None:
        return f"port={view.port_id}\tno data"
    lines = [f"port={view.port_id}\tlatest_period={view.latest_period}"]
    for row in view.breakdown:
        lines.append(f"{row.category}\t{format_cell(row.inbound)}\t{format_cell(row.outbound)}")
    if view.selected_category:
        lines.append(f"trend={view.flow}_{view.selected_category}")
        for label, value in zip(view.trend.labels, view.trend.values):
            lines.append(f"{label}\t{format_cell(value)}")
    return "\n".join(lines)


def render_mobility_report(report: MobilityReport, top: int) -> str:
    """Render monthly totals, the latest-month ranking, and the summary."""
    if report.is_empty:
        return "no mobility data"
    lines = ["monthly_totals"]
    for label, value in zip(report.monthly_totals.labels, report.monthly_totals.values):
        lines.append(f"{label}\t{format_cell(value)}")
    lines.append(f"latest_month={report.latest_month}")
    for entry in report.top_countries(top):
        lines.append(f"{entry.dimension}\t{format_cell(entry.total)}")
    if report.summary is not None:
        if report.summary.latest_months:
            lines.append(f"summary_months={' / '.join(report.summary.latest_months)}")
        if report.summary.summary_text:
            lines.append(report.summary.summary_text)
    return "\n".join(lines)


def render_analytics_series(country_id: str, series: MetricSeries) -> str:
    """Render one country's monthly sessions and active users."""
    lines = [f"country={country_id}"]
    sessions = series.metrics.get("sessions", ())
    active_users = series.metrics.get("activeUsers", ())
    for label, session_count, user_count in zip(series.labels, sessions, active_users):
        lines.append(f"{label}\t{format_cell(session_count)}\t{format_cell(user_count)}")
    return "\n".join(lines)
