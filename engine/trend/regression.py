"""
Ordinary least-squares fit of a snapshot series against days since the first snapshot, with the coefficient of determination used as a confidence proxy.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegressionResult:
    slope: float
    intercept: float
    r_squared: float

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


def _r_squared(x: np.ndarray, y: np.ndarray, slope: float, intercept: float) -> float:
    predicted = slope * x + intercept
    ss_res = float(np.sum((y - predicted) ** 2))
    ss_tot = float(np.sum((y - np.mean(y)) ** 2))
    return 1.0 - ss_res / ss_tot if ss_tot > 0 else 0.0


def fit(x: np.ndarray, y: np.ndarray) -> RegressionResult:
    x_mean = float(np.mean(x))
    y_mean = float(np.mean(y))
    dx = x - x_mean
    denominator = float(np.sum(dx ** 2))
    if denominator > 0:
        slope = float(np.sum(dx * (y - y_mean))) / denominator
    else:
        log.warning("regression: all snapshots share one timestamp, slope forced to 0")
        slope = 0.0
    intercept = y_mean - slope * x_mean
    return RegressionResult(slope=slope, intercept=intercept, r_squared=_r_squared(x, y, slope, intercept))
