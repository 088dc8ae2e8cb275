"""
Estimate aggregation for FPA, including the value adjustment factor, adjusted function points and effort, derived duration and cost metrics, component breakdowns, and team size planning.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.estimate.adjustment import (
    AdjustedEstimate,
    compute_adjusted_estimate,
    gsc_factors,
    influence_vector_from_mapping,
    value_adjustment_factor,
)
from engine.estimate.metrics import (
    ComponentRecord,
    EstimationMetrics,
    complexity_breakdown,
    component_breakdown,
    estimation_metrics,
)
from engine.estimate.team import TeamSizeEstimate, estimate_team_size, ideal_team_size, project_duration_months

__all__ = [
    "AdjustedEstimate",
    "compute_adjusted_estimate",
    "gsc_factors",
    "influence_vector_from_mapping",
    "value_adjustment_factor",
    "ComponentRecord",
    "EstimationMetrics",
    "complexity_breakdown",
    "component_breakdown",
    "estimation_metrics",
    "TeamSizeEstimate",
    "estimate_team_size",
    "ideal_team_size",
    "project_duration_months",
]
