"""
Snapshot series handling for trend analysis: the immutable snapshot type, chronological ordering, and extraction of one numeric field from historical estimate records.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, List, Sequence, Tuple, Union

import numpy as np

from config import SECONDS_PER_DAY
from engine.enums import TrendMetric
from engine.exceptions import InsufficientData, InvalidInput

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class EstimateSnapshot:
    timestamp: datetime
    value: float


def _field(record: Any, name: str) -> Any:
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)


def sort_snapshots(snapshots: Iterable[EstimateSnapshot]) -> Tuple[EstimateSnapshot, ...]:
    items = list(snapshots)
    for snap in items:
        if not isinstance(snap, EstimateSnapshot):
            raise InvalidInput(f"expected EstimateSnapshot, got {type(snap).__name__}")
        if not isinstance(snap.timestamp, datetime):
            raise InvalidInput(f"snapshot timestamp must be a datetime, got {type(snap.timestamp).__name__}")
        if isinstance(snap.value, bool) or not isinstance(snap.value, (int, float, np.integer, np.floating)):
            raise InvalidInput(f"snapshot value must be a number, got {type(snap.value).__name__}")
        if not math.isfinite(float(snap.value)):
            raise InvalidInput(f"snapshot value must be finite, got {snap.value}")
    try:
        return tuple(sorted(items, key=lambda s: s.timestamp))
    except TypeError as exc:
        # naive and aware datetimes cannot be compared
        raise InvalidInput(f"snapshot timestamps are not mutually comparable: {exc}") from exc


def prepare(
    snapshots: Sequence[EstimateSnapshot],
    minimum: int,
    purpose: str,
) -> Tuple[EstimateSnapshot, ...]:
    if snapshots is None or len(snapshots) < minimum:
        got = 0 if snapshots is None else len(snapshots)
        raise InsufficientData(f"at least {minimum} snapshots are required for {purpose}, got {got}")
    return sort_snapshots(snapshots)


def days_since_first(ordered: Sequence[EstimateSnapshot]) -> np.ndarray:
    start = ordered[0].timestamp
    return np.array(
        [(s.timestamp - start).total_seconds() / SECONDS_PER_DAY for s in ordered],
        dtype=float,
    )


def values_of(ordered: Sequence[EstimateSnapshot]) -> np.ndarray:
    return np.array([float(s.value) for s in ordered], dtype=float)


def snapshots_from_records(
    records: Iterable[Any],
    metric: Union[TrendMetric, str],
    timestamp_field: str = "created_at",
) -> List[EstimateSnapshot]:
    """Build snapshots from historical estimates (mappings or objects).

    Records without a usable timestamp or a finite numeric value for
    ``metric`` are skipped with a warning.
    """
    metric = TrendMetric(metric)
    snapshots: List[EstimateSnapshot] = []
    for index, record in enumerate(records):
        ts = _field(record, timestamp_field)
        raw = _field(record, metric.value)
        if not isinstance(ts, datetime):
            log.warning("snapshots_from_records: record %d has no datetime %r, skipped", index, timestamp_field)
            continue
        try:
            value = float(raw)
        except (TypeError, ValueError):
            log.warning("snapshots_from_records: record %d has non-numeric %s=%r, skipped", index, metric.value, raw)
            continue
        if not math.isfinite(value):
            log.warning("snapshots_from_records: record %d has non-finite %s, skipped", index, metric.value)
            continue
        snapshots.append(EstimateSnapshot(timestamp=ts, value=value))
    return snapshots
