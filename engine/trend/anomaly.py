"""
Anomaly detection over historical estimate snapshots using population z-scores.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence

import numpy as np
from scipy.stats import zscore

from config import settings
from engine.exceptions import InvalidInput
from engine.trend.series import EstimateSnapshot, sort_snapshots, values_of

log = logging.getLogger(__name__)


def detect_anomalies(
    snapshots: Sequence[EstimateSnapshot],
    threshold: float | None = None,
) -> List[EstimateSnapshot]:
    if threshold is None:
        threshold = settings.anomaly_default_threshold
    numeric = isinstance(threshold, (int, float, np.integer, np.floating))
    if isinstance(threshold, bool) or not numeric or not math.isfinite(threshold) or threshold <= 0:
        raise InvalidInput(f"anomaly threshold must be a positive number, got {threshold!r}")

    if not snapshots or len(snapshots) < settings.anomaly_min_samples:
        return []

    ordered = sort_snapshots(snapshots)
    arr = values_of(ordered)
    if arr.std() == 0:
        return []

    # population z-scores; a score sitting on the threshold counts, so a lone
    # outlier among five points (z == 2 exactly) is reported at threshold 2
    scores = np.abs(zscore(arr, ddof=0))
    flagged = (scores > threshold) | np.isclose(scores, threshold)

    anomalies = [snap for snap, hit in zip(ordered, flagged) if hit]
    log.debug("detect_anomalies n=%d threshold=%s flagged=%d", len(ordered), threshold, len(anomalies))
    return anomalies
