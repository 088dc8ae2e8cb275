"""
Test cases for the least-squares fit used by trend analysis, including R² and the degenerate zero-variance cases.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import numpy as np
import pytest

from engine.trend.regression import _r_squared, fit


def test_linear_fit_and_r2():
    x = np.array([0, 1, 2, 3, 4], dtype=float)
    y = np.array([1, 2, 3, 4, 5], dtype=float)
    reg = fit(x, y)
    assert reg.slope == pytest.approx(1.0)
    assert reg.intercept == pytest.approx(1.0)
    assert reg.r_squared == pytest.approx(1.0)
    assert reg.predict(10) == pytest.approx(11.0)


def test_matches_numpy_polyfit():
    x = np.array([0.0, 1.5, 4.0, 7.25, 9.0])
    y = np.array([3.0, 2.0, 8.0, 7.5, 12.0])
    reg = fit(x, y)
    slope, intercept = np.polyfit(x, y, 1)
    assert reg.slope == pytest.approx(slope)
    assert reg.intercept == pytest.approx(intercept)
    assert 0.0 < reg.r_squared < 1.0


def test_zero_x_variance_gives_flat_line():
    x = np.zeros(3)
    y = np.array([1.0, 2.0, 6.0])
    reg = fit(x, y)
    assert reg.slope == 0.0
    assert reg.intercept == pytest.approx(3.0)
    assert reg.r_squared == pytest.approx(0.0)


def test_constant_values_r2_zero():
    x = np.arange(5, dtype=float)
    y = np.full(5, 7.0)
    reg = fit(x, y)
    assert reg.slope == 0.0
    assert _r_squared(x, y, reg.slope, reg.intercept) == 0.0
