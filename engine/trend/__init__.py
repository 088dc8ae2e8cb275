"""
Trend and forecast analysis over historical estimate snapshots, including linear trend classification with R² confidence, non-negative forecasting, and z-score anomaly detection.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.trend.analysis import ForecastPoint, TrendAnalysisResult, analyze_trend, forecast_values
from engine.trend.anomaly import detect_anomalies
from engine.trend.series import EstimateSnapshot, snapshots_from_records

__all__ = [
    "ForecastPoint",
    "TrendAnalysisResult",
    "analyze_trend",
    "forecast_values",
    "detect_anomalies",
    "EstimateSnapshot",
    "snapshots_from_records",
]
