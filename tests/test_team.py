"""
Test cases for team size planning, covering fixed duration, fixed team size, guideline-based planning, and the project duration helper.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest
from pydantic import ValidationError

from config import settings
from engine.estimate import estimate_team_size, ideal_team_size, project_duration_months
from engine.estimate.team import optimal_duration_months
from engine.exceptions import InvalidInput
from engine.models import TeamSizeParams


def test_fixed_duration():
    # 200 fp * 10 h * 1.2 = 2400 h; 2 months * 21 days * 8 h = 336 h per person
    params = TeamSizeParams(
        adjusted_function_points=200, productivity_factor=10,
        hours_per_day_per_person=8, project_duration_months=2,
    )
    est = estimate_team_size(params)
    assert est.buffer_hours == pytest.approx(400)
    assert est.total_effort_hours == pytest.approx(2400)
    assert est.total_effort_days == pytest.approx(300)
    assert est.recommended_duration_months == 2
    assert est.recommended_team_size == 7
    assert est.min_team_size == 5
    assert est.max_team_size == 9
    assert est.min_duration_months == pytest.approx(2400 / (9 * 8) / 21)
    assert est.max_duration_months == pytest.approx(2400 / (5 * 8) / 21)


def test_fixed_team():
    params = TeamSizeParams(
        adjusted_function_points=100, productivity_factor=8,
        hours_per_day_per_person=8, team_size=4, buffer_percentage=0,
    )
    est = estimate_team_size(params)
    assert est.recommended_team_size == 4
    assert est.recommended_duration_months == pytest.approx(800 / 32 / 21)


def test_balanced_uses_guideline():
    params = TeamSizeParams(adjusted_function_points=50, productivity_factor=10, hours_per_day_per_person=6)
    est = estimate_team_size(params)
    assert est.recommended_duration_months == 1.5
    assert est.recommended_team_size >= 1
    assert est.min_team_size >= 1


def test_zero_points_still_one_person():
    params = TeamSizeParams(adjusted_function_points=0, productivity_factor=10, hours_per_day_per_person=8)
    est = estimate_team_size(params)
    assert est.recommended_team_size == 1
    assert est.min_team_size == 1
    assert est.max_team_size == 1


@pytest.mark.parametrize("fp,months", [(99, 1.5), (100, 3.0), (299, 3.0), (500, 6.0), (1000, 9.0), (1500, 12.0), (2500, 14.0)])
def test_optimal_duration(fp, months):
    assert optimal_duration_months(fp) == pytest.approx(months)


@pytest.mark.parametrize("fp,size", [(10, (1, 3)), (200, (2, 5)), (700, (4, 8)), (1200, (6, 12)), (5000, (10, 20))])
def test_ideal_team_size(fp, size):
    assert tuple(ideal_team_size(fp)) == size


def test_project_duration():
    assert project_duration_months(100, 2, 10, 8, buffer_percentage=0) == pytest.approx(1000 / 16 / 21)
    assert project_duration_months(100, 2, 10, 8) == pytest.approx(1200 / 16 / 21)
    with pytest.raises(InvalidInput):
        project_duration_months(100, 0, 10, 8)


def test_params_validation():
    with pytest.raises(ValidationError):
        TeamSizeParams(adjusted_function_points=-1, productivity_factor=10, hours_per_day_per_person=8)
    with pytest.raises(ValidationError):
        TeamSizeParams(adjusted_function_points=1, productivity_factor=10, hours_per_day_per_person=8, team_size=0)


def test_half_way_team_rounds_up():
    # 420 h over 1 month * 21 days * 8 h = 2.5 people
    params = TeamSizeParams(
        adjusted_function_points=420, productivity_factor=1,
        hours_per_day_per_person=8, project_duration_months=1, buffer_percentage=0,
    )
    assert estimate_team_size(params).recommended_team_size == 3


def test_buffer_default_follows_settings(monkeypatch):
    monkeypatch.setattr(settings, "team_buffer_percentage", 0.0)
    params = TeamSizeParams(adjusted_function_points=100, productivity_factor=10, hours_per_day_per_person=8)
    assert params.buffer_percentage == 0.0
