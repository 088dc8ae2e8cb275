"""
Test cases for enums used in the estimation engine, including ComplexityLevel weights and cutoffs, ComponentKind parsing with aliases, TrendDirection and TrendMetric.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from engine.enums import ComplexityLevel, ComponentKind, TrendDirection, TrendMetric


def test_complexity_weight_order():
    assert ComplexityLevel.low.weight() < ComplexityLevel.average.weight() < ComplexityLevel.high.weight()
    assert [lvl.weight() for lvl in ComplexityLevel] == [1, 2, 3]


def test_complexity_from_weight_asymmetric_cutoffs():
    assert ComplexityLevel.from_weight(2) == ComplexityLevel.low
    assert ComplexityLevel.from_weight(3) == ComplexityLevel.average
    assert ComplexityLevel.from_weight(4) == ComplexityLevel.average
    assert ComplexityLevel.from_weight(5) == ComplexityLevel.high
    assert ComplexityLevel.from_weight(6) == ComplexityLevel.high


def test_component_kind_parsing_and_aliases():
    assert ComponentKind("ILF") is ComponentKind.ILF
    assert ComponentKind("eq") is ComponentKind.EQ
    assert ComponentKind("ALI") is ComponentKind.ILF
    assert ComponentKind(" aie ") is ComponentKind.EIF
    with pytest.raises(ValueError):
        ComponentKind("XYZ")
    with pytest.raises(ValueError):
        ComponentKind(3)


def test_data_function_flag():
    assert ComponentKind.ILF.is_data_function
    assert ComponentKind.EIF.is_data_function
    assert not any(k.is_data_function for k in (ComponentKind.EI, ComponentKind.EO, ComponentKind.EQ))


def test_trend_enums():
    assert TrendDirection.increasing.value == "increasing"
    assert TrendMetric("adjusted_function_points") is TrendMetric.adjusted_function_points
    assert len(list(TrendMetric)) == 4
