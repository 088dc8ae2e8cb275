"""
Input models for estimation configuration and team size planning.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from config import settings


def _check_range(name: str, value: float, low: float, high: Optional[float] = None) -> float:
    if not value >= low:
        raise ValueError(f"{name} must be at least {low}, got {value}")
    if high is not None and value > high:
        raise ValueError(f"{name} must be at most {high}, got {value}")
    return value


class EstimationConfig(BaseModel):
    # bounds come from settings at validation time, not at import
    average_daily_working_hours: float = 8.0
    team_size: int = 1
    hourly_rate: float = 100.0
    productivity_factor: float = 10.0
    general_system_characteristics: Optional[List[int]] = None

    @field_validator("average_daily_working_hours")
    @classmethod
    def _check_daily_hours(cls, value: float) -> float:
        return _check_range(
            "average_daily_working_hours", value,
            settings.estimation_daily_hours_min, settings.estimation_daily_hours_max,
        )

    @field_validator("team_size")
    @classmethod
    def _check_team_size(cls, value: int) -> int:
        return _check_range(
            "team_size", value,
            settings.estimation_team_size_min, settings.estimation_team_size_max,
        )

    @field_validator("hourly_rate")
    @classmethod
    def _check_hourly_rate(cls, value: float) -> float:
        return _check_range("hourly_rate", value, settings.estimation_hourly_rate_min)

    @field_validator("productivity_factor")
    @classmethod
    def _check_productivity(cls, value: float) -> float:
        return _check_range(
            "productivity_factor", value,
            settings.estimation_productivity_min, settings.estimation_productivity_max,
        )

    @field_validator("general_system_characteristics")
    @classmethod
    def _check_gsc(cls, value: Optional[List[int]]) -> Optional[List[int]]:
        if value is None:
            return value
        if len(value) != settings.gsc_count:
            raise ValueError(f"General System Characteristics must have exactly {settings.gsc_count} values")
        for index, degree in enumerate(value, start=1):
            if not 0 <= degree <= settings.gsc_max_influence:
                raise ValueError(f"GSC value {index} must be between 0 and {settings.gsc_max_influence}")
        return value


class TeamSizeParams(BaseModel):
    adjusted_function_points: float = Field(ge=0.0)
    productivity_factor: float = Field(gt=0.0)
    hours_per_day_per_person: float = Field(gt=0.0, le=24.0)
    project_duration_months: Optional[float] = Field(default=None, gt=0.0)
    team_size: Optional[int] = Field(default=None, ge=1)
    buffer_percentage: float = Field(
        default_factory=lambda: settings.team_buffer_percentage, ge=0.0, le=100.0
    )
