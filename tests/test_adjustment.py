"""
Test cases for the value adjustment factor, adjusted function points and effort, influence vector validation, and the general system characteristics catalog.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import numpy as np
import pytest

from engine.estimate import (
    compute_adjusted_estimate,
    gsc_factors,
    influence_vector_from_mapping,
    value_adjustment_factor,
)
from engine.estimate.adjustment import adjustment_factor, validate_influence_vector
from engine.exceptions import InvalidInput

VECTOR = [3, 4, 2, 3, 4, 3, 3, 3, 2, 4, 3, 3, 2, 0]


def test_documented_example():
    result = compute_adjusted_estimate(100, VECTOR, 8.0)
    assert result.degree_of_influence == 39
    assert result.value_adjustment_factor == pytest.approx(1.04)
    assert result.adjusted_function_points == pytest.approx(104.0)
    assert result.effort_hours == pytest.approx(832.0)


def test_factor_bounds():
    assert value_adjustment_factor([0] * 14) == pytest.approx(0.65)
    assert value_adjustment_factor([5] * 14) == pytest.approx(1.35)


def test_adjustment_factor_rejects_out_of_range_total():
    with pytest.raises(InvalidInput):
        adjustment_factor(71)
    with pytest.raises(InvalidInput):
        adjustment_factor(-1)


@pytest.mark.parametrize("vector", [
    [3] * 13,
    [3] * 15,
    [3] * 13 + [6],
    [3] * 13 + [-1],
    [3] * 13 + [2.5],
    [3] * 13 + [True],
    "33333333333333",
    None,
])
def test_bad_vectors_rejected(vector):
    with pytest.raises(InvalidInput):
        validate_influence_vector(vector)


def test_tuple_vector_accepted():
    assert validate_influence_vector(tuple(VECTOR)) == VECTOR


@pytest.mark.parametrize("ufp,productivity", [(-1, 8), (100, -0.5), (float("nan"), 8), ("100", 8)])
def test_bad_scalars_rejected(ufp, productivity):
    with pytest.raises(InvalidInput):
        compute_adjusted_estimate(ufp, VECTOR, productivity)


def test_zero_unadjusted_count():
    result = compute_adjusted_estimate(0, VECTOR, 8)
    assert result.adjusted_function_points == 0
    assert result.effort_hours == 0


def test_gsc_catalog():
    factors = gsc_factors()
    assert len(factors) == 14
    assert [f.id for f in factors] == list(range(1, 15))
    assert factors[0].name == "Data Communications"
    assert factors[-1].name == "Facilitate Change"


def test_vector_from_mapping_uses_catalog_order():
    degrees = {f.name.upper(): i % 6 for i, f in enumerate(gsc_factors())}
    vector = influence_vector_from_mapping(degrees)
    assert vector == [i % 6 for i in range(14)]


def test_vector_from_mapping_missing_and_unknown():
    degrees = {f.name: 1 for f in gsc_factors()}
    partial = dict(degrees)
    partial.pop("Performance")
    with pytest.raises(InvalidInput, match="missing"):
        influence_vector_from_mapping(partial)
    extra = dict(degrees, Security=2)
    with pytest.raises(InvalidInput, match="unknown"):
        influence_vector_from_mapping(extra)


def test_numpy_vector_accepted():
    assert value_adjustment_factor(np.array(VECTOR)) == pytest.approx(1.04)
