"""Export the monthly projection series as CSV text or an Excel workbook."""
from __future__ import annotations

import csv
import logging
from io import BytesIO, StringIO

from openpyxl import Workbook

from app.models.projection import MonthlyRecord, ProjectionSummary

logger = logging.getLogger(__name__)

EXPORT_HEADERS = ["Month", "Revenue", "Expenses", "Net Monthly", "Cumulative Cash Flow"]

_SUMMARY_LABELS: dict[str, str] = {
    "initial_investment": "Initial Investment",
    "monthly_burn": "Monthly Burn",
    "monthly_revenue_at_scale": "Monthly Revenue at Scale",
    "breakeven_month": "Breakeven Month",
    "first_year_profit": "Year 1 Net Profit",
    "roi_year1": "Year 1 ROI (%)",
    "two_year_profit": "Two Year Profit",
    "total_revenue": "Total Revenue (24 mo)",
}


def _row(record: MonthlyRecord) -> list[int]:
    return [
        record.month,
        record.revenue,
        record.expenses,
        record.net_monthly,
        record.cumulative_cash,
    ]


def export_csv(records: list[MonthlyRecord]) -> str:
    """Comma-separated table, header first, one line per month."""
    buf = StringIO()
    w = csv.writer(buf, lineterminator="\n")
    w.writerow(EXPORT_HEADERS)
    for record in sorted(records, key=lambda r: r.month):
        w.writerow(_row(record))
    return buf.getvalue().removesuffix("\n")


def export_xlsx(records: list[MonthlyRecord], summary: ProjectionSummary | None = None) -> bytes:
    """Workbook with a Projection sheet and, if given, a Summary sheet."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Projection"
    ws.append(EXPORT_HEADERS)
    for record in sorted(records, key=lambda r: r.month):
        ws.append(_row(record))

    if summary is not None:
        ws_summary = wb.create_sheet("Summary")
        ws_summary.append(["Metric", "Value"])
        for key, value in summary.model_dump().items():
            # openpyxl writes None as an empty cell
            ws_summary.append([_SUMMARY_LABELS.get(key, key), "n/a" if value is None else value])

    buf = BytesIO()
    wb.save(buf)
    data = buf.getvalue()
    logger.info("Exported %d months to xlsx (%d bytes)", len(records), len(data))
    return data
