"""
Constants and configuration for the FPA Estimation Engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Dict, List, Tuple

from pydantic import field_validator
from pydantic_settings import BaseSettings


FPENGINE_EQ_DUAL_STRATEGY = os.getenv("FPENGINE_EQ_DUAL_STRATEGY", "max_side").lower()
FPENGINE_LOG_LEVEL = os.getenv("FPENGINE_LOG_LEVEL", "INFO").upper()

EQ_DUAL_STRATEGY_MAX_SIDE = "max_side"
EQ_DUAL_STRATEGY_REJECT = "reject"

# numeric weights used when two axis levels are combined into one rating
COMPLEXITY_WEIGHTS: Dict[str, int] = {
    "low": 1,
    "average": 2,
    "high": 3,
}

SECONDS_PER_DAY = 86400.0


class Settings(BaseSettings):
    log_level: str = FPENGINE_LOG_LEVEL

    # complexity combination cutoffs (sum of two weights)
    complexity_low_max_weight: int = 2
    complexity_average_max_weight: int = 4

    # dual-perspective external query evaluation
    eq_dual_strategy: str = FPENGINE_EQ_DUAL_STRATEGY

    # value adjustment factor
    vaf_base: float = 0.65
    vaf_step: float = 0.01
    gsc_count: int = 14
    gsc_max_influence: int = 5

    # trend analysis
    trend_slope_threshold: float = 0.05
    trend_min_samples: int = 2
    trend_default_forecast_periods: int = 1

    # anomaly detection
    anomaly_min_samples: int = 4
    anomaly_default_threshold: float = 2.0

    # calendar assumptions for duration conversion
    working_days_per_week: float = 5.0
    working_days_per_month: float = 21.0

    # estimation config bounds
    estimation_daily_hours_min: float = 1.0
    estimation_daily_hours_max: float = 24.0
    estimation_team_size_min: int = 1
    estimation_team_size_max: int = 100
    estimation_hourly_rate_min: float = 0.01
    estimation_productivity_min: float = 1.0
    estimation_productivity_max: float = 100.0

    # team size planning
    team_buffer_percentage: float = 20.0
    team_min_ratio: float = 0.8
    team_max_ratio: float = 1.2
    # (upper FP bound exclusive, duration months); above the last bound the
    # duration grows linearly, see engine.estimate.team
    team_duration_guidelines: List[Tuple[float, float]] = [
        (100.0, 1.5),
        (300.0, 3.0),
        (750.0, 6.0),
        (1500.0, 9.0),
    ]
    team_duration_enterprise_base: float = 12.0
    team_duration_enterprise_fp_per_month: float = 500.0
    team_ideal_sizes: List[Tuple[float, int, int]] = [
        (100.0, 1, 3),
        (300.0, 2, 5),
        (750.0, 4, 8),
        (1500.0, 6, 12),
    ]
    team_ideal_enterprise: Tuple[int, int] = (10, 20)

    # component validation warnings for unusually large counts
    validation_data_det_warn: int = 200
    validation_transactional_det_warn: int = 100
    validation_ret_warn: int = 20
    validation_ftr_warn: int = 10

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("eq_dual_strategy", mode="before")
    @classmethod
    def _lower_strategy(cls, value):
        return value.strip().lower() if isinstance(value, str) else value

    model_config = {
        "env_prefix": "FPENGINE_",
        "extra": "ignore",
    }


settings = Settings()
