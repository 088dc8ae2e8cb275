"""
Trend analysis and forecasting over historical estimate snapshots, using a linear fit against elapsed days to classify the trend direction, project future values at the series' average spacing, and report fit quality as a confidence level.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import List, Optional, Sequence, Tuple

import numpy as np

from config import settings
from engine.enums import TrendDirection
from engine.exceptions import InvalidInput
from engine.trend.regression import RegressionResult, fit
from engine.trend.series import EstimateSnapshot, days_since_first, prepare, values_of

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrendAnalysisResult:
    data: Tuple[EstimateSnapshot, ...]
    trend: TrendDirection
    percentage_change: Optional[float]
    average_value: float
    min_value: float
    max_value: float
    forecasted_value: float
    confidence_level: float


@dataclass(frozen=True)
class ForecastPoint:
    date: datetime
    value: float


def _require_periods(name: str, periods: int, minimum: int) -> int:
    if isinstance(periods, bool) or not isinstance(periods, (int, np.integer)):
        raise InvalidInput(f"{name} must be an integer, got {type(periods).__name__}")
    if periods < minimum:
        raise InvalidInput(f"{name} must be at least {minimum}, got {periods}")
    return int(periods)


def _direction(slope: float) -> TrendDirection:
    threshold = settings.trend_slope_threshold
    if slope > threshold:
        return TrendDirection.increasing
    if slope < -threshold:
        return TrendDirection.decreasing
    return TrendDirection.stable


def _percentage_change(first: float, last: float) -> Optional[float]:
    if first == 0:
        log.warning("analyze_trend: first value is 0, percentage change undefined")
        return None
    return (last - first) / first * 100.0


def _fit_series(
    snapshots: Sequence[EstimateSnapshot],
    purpose: str,
) -> Tuple[Tuple[EstimateSnapshot, ...], np.ndarray, np.ndarray, RegressionResult, float]:
    ordered = prepare(snapshots, settings.trend_min_samples, purpose)
    x = days_since_first(ordered)
    y = values_of(ordered)
    reg = fit(x, y)
    step_days = float(x[-1]) / (len(ordered) - 1)
    return ordered, x, y, reg, step_days


def analyze_trend(
    snapshots: Sequence[EstimateSnapshot],
    forecast_periods: int | None = None,
) -> TrendAnalysisResult:
    """Summarise a snapshot series and forecast ``forecast_periods`` steps ahead.

    Snapshots are sorted by timestamp first.  ``percentage_change`` compares
    the chronologically first and last raw values and is ``None`` when the
    first value is 0.  ``confidence_level`` is R² scaled to 0-100.
    """
    if forecast_periods is None:
        forecast_periods = settings.trend_default_forecast_periods
    forecast_periods = _require_periods("forecast_periods", forecast_periods, 1)

    ordered, x, y, reg, step_days = _fit_series(snapshots, "trend analysis")
    forecast_x = float(x[-1]) + step_days * forecast_periods

    result = TrendAnalysisResult(
        data=ordered,
        trend=_direction(reg.slope),
        percentage_change=_percentage_change(float(y[0]), float(y[-1])),
        average_value=float(np.mean(y)),
        min_value=float(np.min(y)),
        max_value=float(np.max(y)),
        forecasted_value=reg.predict(forecast_x),
        confidence_level=reg.r_squared * 100.0,
    )
    log.debug(
        "analyze_trend n=%d slope=%.6f r2=%.4f trend=%s",
        len(ordered), reg.slope, reg.r_squared, result.trend.value,
    )
    return result


def forecast_values(
    snapshots: Sequence[EstimateSnapshot],
    periods: int,
) -> List[ForecastPoint]:
    """Project ``periods`` points past the last snapshot, never below zero."""
    periods = _require_periods("periods", periods, 0)
    ordered, x, _, reg, step_days = _fit_series(snapshots, "forecasting")

    last_x = float(x[-1])
    last_date = ordered[-1].timestamp
    points: List[ForecastPoint] = []
    for i in range(1, periods + 1):
        projected = reg.predict(last_x + step_days * i)
        points.append(ForecastPoint(
            date=last_date + timedelta(days=step_days * i),
            value=max(0.0, projected),
        ))
    return points
