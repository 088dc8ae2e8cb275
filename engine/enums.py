"""
Enumerations for Complexity Levels, Component Kinds, Trend Directions, and Trend Metrics

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from config import COMPLEXITY_WEIGHTS


class ComplexityLevel(str, Enum):
    low = "low"
    average = "average"
    high = "high"

    @classmethod
    def from_weight(cls, combined: int) -> ComplexityLevel:
        # cutoffs live in settings; only the minimum sum maps to low and only
        # the maximum sum maps to high
        from config import settings

        if combined <= settings.complexity_low_max_weight:
            return cls.low
        if combined <= settings.complexity_average_max_weight:
            return cls.average
        return cls.high

    def weight(self) -> int:
        return COMPLEXITY_WEIGHTS[self.value]


class ComponentKind(str, Enum):
    ILF = "ILF"
    EIF = "EIF"
    EI = "EI"
    EO = "EO"
    EQ = "EQ"

    @classmethod
    def _missing_(cls, value: object) -> Optional[ComponentKind]:
        if not isinstance(value, str):
            return None
        key = value.strip().upper()
        key = _KIND_ALIASES.get(key, key)
        for member in cls:
            if member.value == key:
                return member
        return None

    @property
    def is_data_function(self) -> bool:
        return self in (ComponentKind.ILF, ComponentKind.EIF)


_KIND_ALIASES = {
    "ALI": "ILF",
    "AIE": "EIF",
}


class TrendDirection(str, Enum):
    increasing = "increasing"
    decreasing = "decreasing"
    stable = "stable"


class TrendMetric(str, Enum):
    unadjusted_function_points = "unadjusted_function_points"
    adjusted_function_points = "adjusted_function_points"
    estimated_effort_hours = "estimated_effort_hours"
    value_adjustment_factor = "value_adjustment_factor"
