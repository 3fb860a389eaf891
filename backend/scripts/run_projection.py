#!/usr/bin/env python3
"""Run a 24-month partner projection from the command line.

Prints the monthly table, summary and breakeven insight for a preset,
optionally overriding individual inputs, and can write the series to CSV
or XLSX.

Usage:
  cd backend
  python scripts/run_projection.py --preset white_label
  python scripts/run_projection.py --preset direct --leads 30 --ramp 6 --out direct.xlsx
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from pydantic import ValidationError

from app.config import settings
from app.models.projection import ProjectionInputs, ProjectionRequest
from app.services.export_service import EXPORT_HEADERS, export_csv, export_xlsx
from app.services.projection_service import run_projection
from app.simulation.presets import UnknownPresetError, get_preset, list_preset_ids
from app.simulation.projection import InvalidParameterError

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s", datefmt="%H:%M:%S")
logger = logging.getLogger(__name__)

# CLI flag -> ProjectionInputs field
_OVERRIDES = {
    "upfront_fee": "upfront_fee",
    "setup_costs": "setup_costs",
    "tech_fee": "monthly_tech_fee",
    "marketing": "monthly_marketing",
    "staff": "monthly_staff_cost",
    "deal_value": "avg_deal_value",
    "commission": "commission_pct",
    "leads": "leads_per_month",
    "conversion": "conversion_pct",
    "ramp": "ramp_up_months",
}


def build_inputs(args: argparse.Namespace) -> ProjectionInputs:
    base = ProjectionInputs.from_parameters(get_preset(args.preset).parameters)
    overrides = {
        field: getattr(args, flag)
        for flag, field in _OVERRIDES.items()
        if getattr(args, flag) is not None
    }
    return ProjectionInputs(**{**base.model_dump(), **overrides})


def print_table(result) -> None:
    print(" | ".join(f"{h:>20}" for h in EXPORT_HEADERS))
    for r in result.records:
        print(" | ".join(f"{v:>20,}" for v in (r.month, r.revenue, r.expenses, r.net_monthly, r.cumulative_cash)))
    print()
    s = result.summary
    roi = "n/a" if s.roi_year1 is None else f"{s.roi_year1}%"
    print(f"Initial investment:       {s.initial_investment:,.0f}")
    print(f"Monthly burn:             {s.monthly_burn:,.0f}")
    print(f"Monthly revenue at scale: {s.monthly_revenue_at_scale:,}")
    print(f"Breakeven:                {result.insight.headline}")
    print(f"Year 1 net profit:        {s.first_year_profit:,} (ROI {roi})")
    print(f"Two year profit:          {s.two_year_profit:,}")
    print()
    print(result.insight.message)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="24-month partner breakeven & ROI projection")
    parser.add_argument(
        "--preset",
        default=settings.DEFAULT_PRESET,
        help=f"One of {', '.join(list_preset_ids())} (default: {settings.DEFAULT_PRESET})",
    )
    parser.add_argument("--upfront-fee", type=float, help="One-time franchise / license fee")
    parser.add_argument("--setup-costs", type=float, help="One-time setup & training costs")
    parser.add_argument("--tech-fee", type=float, help="Monthly platform / tech fee")
    parser.add_argument("--marketing", type=float, help="Monthly marketing budget")
    parser.add_argument("--staff", type=float, help="Monthly staff cost")
    parser.add_argument("--deal-value", type=float, help="Average deal value (TCV)")
    parser.add_argument("--commission", type=float, help="Commission %% kept by the partner")
    parser.add_argument("--leads", type=float, help="Leads per month at full capacity")
    parser.add_argument("--conversion", type=float, help="Lead conversion %%")
    parser.add_argument("--ramp", type=int, help="Months to reach full capacity")
    parser.add_argument("--out", help="Write the series to this .csv or .xlsx file")
    return parser


def main():
    args = build_parser().parse_args()

    try:
        inputs = build_inputs(args)
    except UnknownPresetError:
        logger.error("Unknown preset: %s", args.preset)
        sys.exit(1)
    except ValidationError as e:
        logger.error("Invalid parameters: %s", e)
        sys.exit(1)

    try:
        result = run_projection(ProjectionRequest(parameters=inputs))
    except InvalidParameterError as e:
        logger.error("Invalid parameters: %s", e)
        sys.exit(1)
    print_table(result)

    if args.out:
        out_path = Path(args.out)
        if out_path.suffix.lower() == ".xlsx":
            out_path.write_bytes(export_xlsx(result.records, result.summary))
        else:
            out_path.write_text(export_csv(result.records), encoding="utf-8")
        logger.info("Wrote %s", out_path)


if __name__ == "__main__":
    main()
