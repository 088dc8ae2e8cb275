"""
Team size planning for FPA estimates, trading team size against project duration for a buffered effort figure, with empirical duration and team size guidelines by project size.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from config import settings
from engine.exceptions import InvalidInput
from engine.models import TeamSizeParams


@dataclass(frozen=True)
class TeamSizeEstimate:
    total_effort_hours: float
    total_effort_days: float
    total_effort_months: float
    recommended_team_size: int
    recommended_duration_months: float
    min_team_size: int
    max_team_size: int
    min_duration_months: float
    max_duration_months: float
    buffer_hours: float
    working_days_per_month: float


def _team_for_duration(effort_hours: float, months: float, hours_per_day: float) -> float:
    available_per_person = months * settings.working_days_per_month * hours_per_day
    return effort_hours / available_per_person


def _duration_for_team(effort_hours: float, team_size: float, hours_per_day: float) -> float:
    days = effort_hours / (team_size * hours_per_day)
    return days / settings.working_days_per_month


def optimal_duration_months(function_points: float) -> float:
    for upper, months in settings.team_duration_guidelines:
        if function_points < upper:
            return months
    last_bound = settings.team_duration_guidelines[-1][0]
    return (
        settings.team_duration_enterprise_base
        + (function_points - last_bound) / settings.team_duration_enterprise_fp_per_month
    )


def ideal_team_size(function_points: float) -> Tuple[int, int]:
    for upper, low, high in settings.team_ideal_sizes:
        if function_points < upper:
            return low, high
    return settings.team_ideal_enterprise


def estimate_team_size(params: TeamSizeParams) -> TeamSizeEstimate:
    base_effort = params.adjusted_function_points * params.productivity_factor
    buffer_hours = base_effort * params.buffer_percentage / 100.0
    total_effort = base_effort + buffer_hours
    total_days = total_effort / params.hours_per_day_per_person
    hours = params.hours_per_day_per_person

    fixed_duration = params.project_duration_months
    fixed_team = params.team_size
    if fixed_duration and not fixed_team:
        duration = fixed_duration
        team = _team_for_duration(total_effort, duration, hours)
    elif fixed_team and not fixed_duration:
        team = float(fixed_team)
        duration = _duration_for_team(total_effort, fixed_team, hours)
    else:
        duration = optimal_duration_months(params.adjusted_function_points)
        team = _team_for_duration(total_effort, duration, hours)

    min_team = max(1, math.floor(team * settings.team_min_ratio))
    max_team = max(1, math.ceil(team * settings.team_max_ratio))

    return TeamSizeEstimate(
        total_effort_hours=total_effort,
        total_effort_days=total_days,
        total_effort_months=total_days / settings.working_days_per_month,
        recommended_team_size=max(1, math.floor(team + 0.5)),
        recommended_duration_months=duration,
        min_team_size=min_team,
        max_team_size=max_team,
        min_duration_months=_duration_for_team(total_effort, max_team, hours),
        max_duration_months=_duration_for_team(total_effort, min_team, hours),
        buffer_hours=buffer_hours,
        working_days_per_month=settings.working_days_per_month,
    )


def project_duration_months(
    adjusted_function_points: float,
    team_size: int,
    productivity_factor: float,
    hours_per_day: float,
    buffer_percentage: float | None = None,
) -> float:
    if buffer_percentage is None:
        buffer_percentage = settings.team_buffer_percentage
    if team_size <= 0 or hours_per_day <= 0:
        raise InvalidInput("team size and hours per day must be greater than 0")
    effort = adjusted_function_points * productivity_factor * (1 + buffer_percentage / 100.0)
    return _duration_for_team(effort, team_size, hours_per_day)
