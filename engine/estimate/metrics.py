"""
Estimation metrics and component breakdowns for FPA estimates, deriving effort, duration and cost figures from per-component function points and a project-level estimation configuration.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Sequence

from config import settings
from engine.enums import ComplexityLevel, ComponentKind
from engine.estimate.adjustment import adjustment_factor, degree_of_influence
from engine.exceptions import InvalidInput
from engine.models import EstimationConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class EstimationMetrics:
    unadjusted_function_points: float
    degree_of_influence: int
    adjustment_factor: float
    adjusted_function_points: float
    effort_hours: float
    duration_days: float
    duration_weeks: float
    duration_months: float
    total_cost: float
    cost_per_function_point: float
    cost_per_person: float
    hours_per_person: float
    average_daily_working_hours: float
    team_size: int
    hourly_rate: float
    productivity_factor: float


@dataclass(frozen=True)
class ComponentRecord:
    kind: ComponentKind
    complexity: ComplexityLevel
    function_points: int


@dataclass(frozen=True)
class BreakdownEntry:
    count: int
    points: int


def unadjusted_function_points(component_function_points: Iterable[float]) -> float:
    total = 0.0
    for points in component_function_points:
        if points < 0:
            raise InvalidInput(f"component function points cannot be negative, got {points}")
        total += points
    return total


def duration_days(effort_hours: float, team_size: int, daily_hours: float) -> float:
    if team_size <= 0:
        raise InvalidInput("team size must be greater than 0")
    if daily_hours <= 0:
        raise InvalidInput("daily working hours must be greater than 0")
    return effort_hours / (team_size * daily_hours)


def estimation_metrics(
    component_function_points: Sequence[float],
    config: EstimationConfig,
) -> EstimationMetrics:
    ufp = unadjusted_function_points(component_function_points)

    # without a GSC vector the count is left unadjusted
    ni = 0
    fa = 1.0
    if config.general_system_characteristics is not None:
        ni = degree_of_influence(config.general_system_characteristics)
        fa = adjustment_factor(ni)

    afp = ufp * fa
    effort = afp * config.productivity_factor
    days = duration_days(effort, config.team_size, config.average_daily_working_hours)
    total_cost = effort * config.hourly_rate

    log.debug("estimation_metrics ufp=%s fa=%.2f effort=%.2f days=%.2f", ufp, fa, effort, days)
    return EstimationMetrics(
        unadjusted_function_points=ufp,
        degree_of_influence=ni,
        adjustment_factor=fa,
        adjusted_function_points=afp,
        effort_hours=effort,
        duration_days=days,
        duration_weeks=days / settings.working_days_per_week,
        duration_months=days / settings.working_days_per_month,
        total_cost=total_cost,
        cost_per_function_point=total_cost / afp if afp else 0.0,
        cost_per_person=total_cost / config.team_size,
        hours_per_person=effort / config.team_size,
        average_daily_working_hours=config.average_daily_working_hours,
        team_size=config.team_size,
        hourly_rate=config.hourly_rate,
        productivity_factor=config.productivity_factor,
    )


def component_breakdown(components: Iterable[ComponentRecord]) -> Dict[str, BreakdownEntry]:
    counts: Dict[str, int] = {k.value: 0 for k in ComponentKind}
    points: Dict[str, int] = {k.value: 0 for k in ComponentKind}
    for component in components:
        counts[component.kind.value] += 1
        points[component.kind.value] += component.function_points

    breakdown = {key: BreakdownEntry(count=counts[key], points=points[key]) for key in counts}
    breakdown["total"] = BreakdownEntry(count=sum(counts.values()), points=sum(points.values()))
    return breakdown


def complexity_breakdown(components: Iterable[ComponentRecord]) -> Dict[str, BreakdownEntry]:
    counts: Dict[str, int] = {lvl.value: 0 for lvl in ComplexityLevel}
    points: Dict[str, int] = {lvl.value: 0 for lvl in ComplexityLevel}
    for component in components:
        counts[component.complexity.value] += 1
        points[component.complexity.value] += component.function_points
    return {key: BreakdownEntry(count=counts[key], points=points[key]) for key in counts}
