#!/usr/bin/env python3

"""
Command line entry point for the FPA Estimation Engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from datetime import datetime
from typing import Any, List, Optional, Sequence

from config import settings
from engine.complexity import classify, classify_query_dual
from engine.estimate import compute_adjusted_estimate
from engine.exceptions import EstimationError
from engine.trend import EstimateSnapshot, analyze_trend, detect_anomalies, forecast_values

log = logging.getLogger(__name__)


def _int_list(raw: str) -> List[int]:
    try:
        return [int(part) for part in raw.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected comma separated integers, got {raw!r}") from exc


def _load_snapshots(path: str) -> List[EstimateSnapshot]:
    if path == "-":
        payload = json.load(sys.stdin)
    else:
        with open(path, encoding="utf-8") as fh:
            payload = json.load(fh)
    return [
        EstimateSnapshot(timestamp=datetime.fromisoformat(item["timestamp"]), value=float(item["value"]))
        for item in payload
    ]


def _dump(obj: Any) -> None:
    print(json.dumps(obj, indent=2, default=str))


def _cmd_classify(args: argparse.Namespace) -> None:
    result = classify(args.kind, args.axis_a, args.axis_b)
    _dump(asdict(result))


def _cmd_query(args: argparse.Namespace) -> None:
    result = classify_query_dual(
        args.input_ftr, args.input_det, args.output_ftr, args.output_det, strategy=args.strategy,
    )
    _dump(asdict(result))


def _cmd_estimate(args: argparse.Namespace) -> None:
    result = compute_adjusted_estimate(args.unadjusted_fp, args.gsc, args.productivity)
    _dump(asdict(result))


def _cmd_trend(args: argparse.Namespace) -> None:
    snapshots = _load_snapshots(args.path)
    analysis = analyze_trend(snapshots, forecast_periods=args.periods)
    _dump({
        "analysis": asdict(analysis),
        "forecast": [asdict(p) for p in forecast_values(snapshots, args.periods)],
        "anomalies": [asdict(s) for s in detect_anomalies(snapshots, args.threshold)],
    })


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Function point estimation engine")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("classify", help="Classify one component from its two counts")
    p.add_argument("kind", help="ILF, EIF, EI, EO or EQ (ALI/AIE accepted)")
    p.add_argument("axis_a", type=int, help="RET count for ILF/EIF, FTR count otherwise")
    p.add_argument("axis_b", type=int, help="DET count")
    p.set_defaults(func=_cmd_classify)

    p = sub.add_parser("query", help="Classify an external query from its input and output sides")
    p.add_argument("input_ftr", type=int)
    p.add_argument("input_det", type=int)
    p.add_argument("output_ftr", type=int)
    p.add_argument("output_det", type=int)
    p.add_argument("--strategy", default=None, help="Dual query strategy (default from settings)")
    p.set_defaults(func=_cmd_query)

    p = sub.add_parser("estimate", help="Apply the value adjustment factor and productivity")
    p.add_argument("unadjusted_fp", type=float)
    p.add_argument("--gsc", type=_int_list, required=True, help="14 comma separated degrees 0-5")
    p.add_argument("--productivity", type=float, required=True, help="Hours per function point")
    p.set_defaults(func=_cmd_estimate)

    p = sub.add_parser("trend", help="Trend, forecast and anomalies for a JSON snapshot list")
    p.add_argument("path", help="JSON file of {timestamp, value} items, or - for stdin")
    p.add_argument("--periods", type=int, default=settings.trend_default_forecast_periods)
    p.add_argument("--threshold", type=float, default=settings.anomaly_default_threshold)
    p.set_defaults(func=_cmd_trend)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )
    args = _build_parser().parse_args(argv)
    try:
        args.func(args)
    except EstimationError as exc:
        log.error("%s failed: %s", args.command, exc)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
