"""
Validation report for FPA component counts. Unlike :func:`engine.complexity.classify`, which fails fast, this collects every error and warning for a component so that a data-entry layer can show them together.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

import numpy as np

from config import settings
from engine.complexity.classifier import classify
from engine.enums import ComplexityLevel, ComponentKind
from engine.exceptions import InvalidInput

log = logging.getLogger(__name__)


@dataclass
class ValidationReport:
    kind: Optional[ComponentKind]
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    complexity: Optional[ComplexityLevel] = None
    function_points: Optional[int] = None

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _is_count(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _check_det(report: ValidationReport, det: Any) -> None:
    if not _is_count(det):
        report.errors.append("DET (data element types) must be an integer")
        return
    if det < 1:
        report.errors.append("DET must be at least 1")
        return
    limit = (
        settings.validation_data_det_warn
        if report.kind.is_data_function
        else settings.validation_transactional_det_warn
    )
    if det > limit:
        report.warnings.append(
            f"DET value ({det}) seems unusually high for {report.kind.value}. Typical range is 1-{limit}."
        )


def _check_ret(report: ValidationReport, ret: Any) -> None:
    if not _is_count(ret):
        report.errors.append(f"RET (record element types) must be an integer for {report.kind.value}")
        return
    if ret < 1:
        report.errors.append("RET must be at least 1")
        return
    if ret > settings.validation_ret_warn:
        report.warnings.append(
            f"RET value ({ret}) seems unusually high. Typical range is 1-{settings.validation_ret_warn}."
        )


def _check_ftr(report: ValidationReport, ftr: Any) -> None:
    if not _is_count(ftr):
        report.errors.append(f"FTR (file types referenced) must be an integer for {report.kind.value}")
        return
    if ftr < 0:
        report.errors.append("FTR cannot be negative")
        return
    if ftr > settings.validation_ftr_warn:
        report.warnings.append(
            f"FTR value ({ftr}) seems unusually high. Typical range is 0-{settings.validation_ftr_warn}."
        )


def validate_component(kind: Any, axis_a: Any, axis_b: Any) -> ValidationReport:
    try:
        resolved = ComponentKind(kind)
    except ValueError:
        allowed = ", ".join(k.value for k in ComponentKind)
        return ValidationReport(
            kind=None,
            errors=[f"Invalid component type: {kind!r}. Must be one of: {allowed}"],
        )

    report = ValidationReport(kind=resolved)
    _check_det(report, axis_b)
    if resolved.is_data_function:
        _check_ret(report, axis_a)
    else:
        _check_ftr(report, axis_a)
    if report.errors:
        return report

    try:
        result = classify(resolved, axis_a, axis_b)
    except InvalidInput as exc:
        report.errors.append(f"Failed to calculate complexity: {exc}")
        return report

    report.complexity = result.complexity
    report.function_points = result.function_points
    if report.warnings:
        log.info("validate_component kind=%s warnings=%d", resolved.value, len(report.warnings))
    return report
