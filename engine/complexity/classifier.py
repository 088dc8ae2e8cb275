"""
Classification logic for FPA components, bucketing the two structural counts of a component into complexity levels, combining them with the integer weight rule, and looking up the function point weight for the component kind.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Union

import numpy as np

from engine.complexity.tables import AxisTable, function_points_for, matrix_for
from engine.enums import ComplexityLevel, ComponentKind
from engine.exceptions import InvalidInput

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Classification:
    kind: ComponentKind
    complexity: ComplexityLevel
    function_points: int
    axis_a_level: ComplexityLevel
    axis_b_level: ComplexityLevel


def _coerce_kind(kind: Union[ComponentKind, str]) -> ComponentKind:
    try:
        return ComponentKind(kind)
    except ValueError as exc:
        allowed = ", ".join(k.value for k in ComponentKind)
        raise InvalidInput(f"unknown component kind {kind!r}; expected one of {allowed}") from exc


def require_count(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidInput(f"{name} must be an integer count, got {type(value).__name__}")
    if value < 0:
        raise InvalidInput(f"{name} must be non-negative, got {value}")
    return int(value)


def combine(level_a: ComplexityLevel, level_b: ComplexityLevel) -> ComplexityLevel:
    return ComplexityLevel.from_weight(level_a.weight() + level_b.weight())


def bucket(value: int, axis: AxisTable) -> ComplexityLevel:
    return axis.level(require_count(axis.name, value))


def classify(kind: Union[ComponentKind, str], axis_a: int, axis_b: int) -> Classification:
    """Classify one component from its two structural counts.

    ``axis_a`` is the RET count for ILF/EIF and the FTR count for EI/EO/EQ;
    ``axis_b`` is always the DET count.  Raises :class:`InvalidInput` on an
    unknown kind or a negative/non-integer count.
    """
    kind = _coerce_kind(kind)
    matrix = matrix_for(kind)
    level_a = bucket(axis_a, matrix.axis_a)
    level_b = bucket(axis_b, matrix.axis_b)
    final = combine(level_a, level_b)
    points = function_points_for(kind, final)

    log.debug(
        "classify kind=%s %s=%s(%s) %s=%s(%s) -> %s fp=%d",
        kind.value, matrix.axis_a.name, axis_a, level_a.value,
        matrix.axis_b.name, axis_b, level_b.value, final.value, points,
    )
    return Classification(
        kind=kind,
        complexity=final,
        function_points=points,
        axis_a_level=level_a,
        axis_b_level=level_b,
    )
