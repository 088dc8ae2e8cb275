"""
Value adjustment logic for FPA estimates, turning the 14 general system characteristics into a value adjustment factor and applying it, together with the productivity factor, to the unadjusted function point count.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, List, Mapping, Sequence, Tuple

import numpy as np

from config import settings
from engine.exceptions import InvalidInput

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneralSystemCharacteristic:
    id: int
    name: str
    description: str


GSC_FACTORS: Tuple[GeneralSystemCharacteristic, ...] = (
    GeneralSystemCharacteristic(1, "Data Communications",
                                "The degree to which the application communicates directly with the processor."),
    GeneralSystemCharacteristic(2, "Distributed Data Processing",
                                "The degree to which the application transfers data among physical components of the application."),
    GeneralSystemCharacteristic(3, "Performance",
                                "The performance considerations of the user."),
    GeneralSystemCharacteristic(4, "Heavily Used Configuration",
                                "The degree to which computer resource restrictions influence the development of the application."),
    GeneralSystemCharacteristic(5, "Transaction Rate",
                                "The rate of business transactions."),
    GeneralSystemCharacteristic(6, "Online Data Entry",
                                "The percentage of information that is entered online."),
    GeneralSystemCharacteristic(7, "End-User Efficiency",
                                "The degree of consideration for human factors and ease of use."),
    GeneralSystemCharacteristic(8, "Online Update",
                                "The degree to which internal logical files are updated online."),
    GeneralSystemCharacteristic(9, "Complex Processing",
                                "The degree to which processing logic influences the development of the application."),
    GeneralSystemCharacteristic(10, "Reusability",
                                "The degree to which the application has been specifically designed, developed, and supported for reuse."),
    GeneralSystemCharacteristic(11, "Installation Ease",
                                "The degree of difficulty in conversion and installation."),
    GeneralSystemCharacteristic(12, "Operational Ease",
                                "The degree to which the application addresses operational aspects."),
    GeneralSystemCharacteristic(13, "Multiple Sites",
                                "The degree to which the application has been specifically designed, developed, and supported for multiple installations."),
    GeneralSystemCharacteristic(14, "Facilitate Change",
                                "The degree to which the application has been specifically designed, developed, and supported to facilitate change."),
)


@dataclass(frozen=True)
class AdjustedEstimate:
    unadjusted_function_points: float
    degree_of_influence: int
    value_adjustment_factor: float
    adjusted_function_points: float
    effort_hours: float


def gsc_factors() -> Tuple[GeneralSystemCharacteristic, ...]:
    return GSC_FACTORS


def _require_non_negative(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise InvalidInput(f"{name} must be a number, got {type(value).__name__}")
    value = float(value)
    if not math.isfinite(value) or value < 0:
        raise InvalidInput(f"{name} must be a finite non-negative number, got {value}")
    return value


def validate_influence_vector(vector: Sequence[Any]) -> List[int]:
    if isinstance(vector, np.ndarray):
        vector = vector.tolist()
    if isinstance(vector, (str, bytes)) or not isinstance(vector, Sequence):
        raise InvalidInput("influence vector must be a sequence of integers")
    if len(vector) != settings.gsc_count:
        raise InvalidInput(
            f"influence vector must have exactly {settings.gsc_count} values, got {len(vector)}"
        )
    degrees: List[int] = []
    for index, degree in enumerate(vector, start=1):
        if isinstance(degree, bool) or not isinstance(degree, (int, np.integer)):
            raise InvalidInput(f"GSC value {index} must be an integer, got {type(degree).__name__}")
        if not 0 <= degree <= settings.gsc_max_influence:
            raise InvalidInput(
                f"GSC value {index} must be between 0 and {settings.gsc_max_influence}, got {degree}"
            )
        degrees.append(int(degree))
    return degrees


def influence_vector_from_mapping(degrees: Mapping[str, int]) -> List[int]:
    """Order a name -> degree mapping by the GSC catalog.

    Names match case-insensitively; every catalog factor must be present and
    unknown names are rejected.
    """
    by_name = {str(name).strip().lower(): degree for name, degree in degrees.items()}
    known = {f.name.lower() for f in GSC_FACTORS}
    unknown = sorted(set(by_name) - known)
    if unknown:
        raise InvalidInput(f"unknown general system characteristics: {', '.join(unknown)}")
    missing = [f.name for f in GSC_FACTORS if f.name.lower() not in by_name]
    if missing:
        raise InvalidInput(f"missing general system characteristics: {', '.join(missing)}")
    return validate_influence_vector([by_name[f.name.lower()] for f in GSC_FACTORS])


def degree_of_influence(vector: Sequence[int]) -> int:
    return sum(validate_influence_vector(vector))


def adjustment_factor(total_influence: int) -> float:
    upper = settings.gsc_count * settings.gsc_max_influence
    if not 0 <= total_influence <= upper:
        raise InvalidInput(f"degree of influence must be between 0 and {upper}, got {total_influence}")
    return settings.vaf_base + settings.vaf_step * total_influence


def value_adjustment_factor(vector: Sequence[int]) -> float:
    return adjustment_factor(degree_of_influence(vector))


def compute_adjusted_estimate(
    unadjusted_fp: float,
    influence_vector: Sequence[int],
    productivity_factor: float,
) -> AdjustedEstimate:
    """Apply the value adjustment factor and productivity to an unadjusted count.

    ``unadjusted_fp`` is the caller's sum of per-component function points and
    ``productivity_factor`` is hours per function point.  The factor stays in
    [0.65, 1.35] because every influence degree is checked to be in [0, 5].
    """
    unadjusted = _require_non_negative("unadjusted function points", unadjusted_fp)
    productivity = _require_non_negative("productivity factor", productivity_factor)
    ni = degree_of_influence(influence_vector)
    vaf = adjustment_factor(ni)
    adjusted = unadjusted * vaf
    effort = adjusted * productivity

    log.debug(
        "compute_adjusted_estimate ufp=%s ni=%d vaf=%.2f afp=%.4f effort=%.4f",
        unadjusted, ni, vaf, adjusted, effort,
    )
    return AdjustedEstimate(
        unadjusted_function_points=unadjusted,
        degree_of_influence=ni,
        value_adjustment_factor=vaf,
        adjusted_function_points=adjusted,
        effort_hours=effort,
    )
