"""
Static complexity matrices and function point tables for the five FPA component kinds. Each axis is built from two cut points so that the low, average and high ranges always cover every non-negative count exactly once.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from engine.enums import ComplexityLevel, ComponentKind


@dataclass(frozen=True)
class ComplexityRange:
    min: int
    max: Optional[int]

    def contains(self, value: int) -> bool:
        return value >= self.min and (self.max is None or value <= self.max)


@dataclass(frozen=True)
class AxisTable:
    name: str
    low: ComplexityRange
    average: ComplexityRange
    high: ComplexityRange

    def level(self, value: int) -> ComplexityLevel:
        if self.low.contains(value):
            return ComplexityLevel.low
        if self.average.contains(value):
            return ComplexityLevel.average
        return ComplexityLevel.high


@dataclass(frozen=True)
class ComplexityMatrix:
    axis_a: AxisTable
    axis_b: AxisTable


def _axis(name: str, low_max: int, average_max: int) -> AxisTable:
    if not 0 <= low_max < average_max:
        raise ValueError(f"axis {name}: cut points must satisfy 0 <= {low_max} < {average_max}")
    return AxisTable(
        name=name,
        low=ComplexityRange(0, low_max),
        average=ComplexityRange(low_max + 1, average_max),
        high=ComplexityRange(average_max + 1, None),
    )


def _points(low: int, average: int, high: int) -> Mapping[ComplexityLevel, int]:
    return MappingProxyType({
        ComplexityLevel.low: low,
        ComplexityLevel.average: average,
        ComplexityLevel.high: high,
    })


DATA_FUNCTION_MATRIX = ComplexityMatrix(
    axis_a=_axis("ret", 1, 5),
    axis_b=_axis("det", 19, 50),
)

EI_MATRIX = ComplexityMatrix(
    axis_a=_axis("ftr", 1, 2),
    axis_b=_axis("det", 4, 15),
)

EO_MATRIX = ComplexityMatrix(
    axis_a=_axis("ftr", 1, 3),
    axis_b=_axis("det", 5, 19),
)

EQ_MATRIX = ComplexityMatrix(
    axis_a=_axis("ftr", 1, 3),
    axis_b=_axis("det", 5, 19),
)

MATRICES: Mapping[ComponentKind, ComplexityMatrix] = MappingProxyType({
    ComponentKind.ILF: DATA_FUNCTION_MATRIX,
    ComponentKind.EIF: DATA_FUNCTION_MATRIX,
    ComponentKind.EI: EI_MATRIX,
    ComponentKind.EO: EO_MATRIX,
    ComponentKind.EQ: EQ_MATRIX,
})

FUNCTION_POINTS: Mapping[ComponentKind, Mapping[ComplexityLevel, int]] = MappingProxyType({
    ComponentKind.ILF: _points(7, 10, 15),
    ComponentKind.EIF: _points(5, 7, 10),
    ComponentKind.EI: _points(3, 4, 6),
    ComponentKind.EO: _points(4, 5, 7),
    ComponentKind.EQ: _points(3, 4, 6),
})


def matrix_for(kind: ComponentKind) -> ComplexityMatrix:
    return MATRICES[kind]


def function_points_for(kind: ComponentKind, level: ComplexityLevel) -> int:
    return FUNCTION_POINTS[kind][level]
