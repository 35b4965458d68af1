"""Drive the calculator and assistant views from a terminal.

Usage:
    python scripts/console.py estimate --bill 3000 --city Jaipur --roof-area 500
    python scripts/console.py chat
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from pydantic import ValidationError

from suryamitra.core.dependencies import get_chat_service, get_estimation_service, get_settings
from suryamitra.core.logging import configure_logging
from suryamitra.schemas.chat import ChatMessage
from suryamitra.schemas.estimate import EstimateReport, EstimationRequest
from suryamitra.views.assistant import AssistantView
from suryamitra.views.calculator import CalculatorView


def _print_report(report: EstimateReport) -> None:
    result = report.result
    print(f"AI Recommendation: {result.recommendation}")
    print(f"System Size:       {result.estimated_system_size_kw} kW")
    print(f"Monthly Savings:   ₹{result.monthly_savings_inr:,.0f}")
    print(
        f"Net Cost:          ₹{report.net_cost_inr:,.0f} "
        f"(subsidy ₹{result.subsidy_amount_inr:,.0f})"
    )
    print(f"Payback Period:    {result.payback_period_years} years")
    for point in report.co2_projection:
        print(f"CO2 offset year {point.year:>2}: {point.tons:.1f} t")


async def _run_estimate(args: argparse.Namespace) -> int:
    try:
        request = EstimationRequest(
            monthly_bill_inr=args.bill, city=args.city, roof_area_sq_ft=args.roof_area
        )
    except ValidationError as exc:
        print(exc, file=sys.stderr)
        return 2
    view = CalculatorView(get_estimation_service())
    print("Analyzing roof data...")
    await view.submit(request)
    if view.result is None:
        print(view.error, file=sys.stderr)
        return 1
    _print_report(EstimateReport.from_result(view.result))
    return 0


class _TranscriptPrinter:
    """Prints only the newly arrived tail of the streaming model message."""

    def __init__(self) -> None:
        self._printed = 0
        self._length = 0

    def __call__(self, transcript: tuple[ChatMessage, ...]) -> None:
        if len(transcript) != self._length:
            self._length = len(transcript)
            self._printed = 0
        last = transcript[-1]
        if last.role != "model":
            return
        if last.is_error:
            print(last.text, file=sys.stderr)
            return
        sys.stdout.write(last.text[self._printed :])
        sys.stdout.flush()
        self._printed = len(last.text)


async def _run_chat(_: argparse.Namespace) -> int:
    view = AssistantView(get_chat_service())
    print(view.transcript[0].text)
    view.subscribe(_TranscriptPrinter())
    loop = asyncio.get_running_loop()
    while True:
        line = await loop.run_in_executor(None, sys.stdin.readline)
        if not line or line.strip() in {"exit", "quit"}:
            return 0
        if await view.send(line):
            print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SuryaMitra solar console")
    subparsers = parser.add_subparsers(dest="command", required=True)

    estimate = subparsers.add_parser("estimate", help="Estimate rooftop solar savings")
    estimate.add_argument("--bill", type=float, required=True, help="Average monthly bill (₹)")
    estimate.add_argument("--city", required=True, help="City / location")
    estimate.add_argument("--roof-area", type=float, required=True, help="Roof area (sq. ft)")
    estimate.set_defaults(handler=_run_estimate)

    chat = subparsers.add_parser("chat", help="Chat with the SuryaMitra assistant")
    chat.set_defaults(handler=_run_chat)
    return parser


def main() -> None:
    args = build_parser().parse_args()
    configure_logging(get_settings().log_level)
    sys.exit(asyncio.run(args.handler(args)))


if __name__ == "__main__":
    main()
