"""
Test cases for the command line entry point.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import json

import pytest

import main


def test_classify_command(capsys):
    assert main.main(["classify", "ILF", "3", "25"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["complexity"] == "average"
    assert out["function_points"] == 10
    assert out["kind"] == "ILF"


def test_query_command(capsys):
    assert main.main(["query", "0", "1", "4", "25", "--strategy", "max_side"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["complexity"] == "high"


def test_estimate_command(capsys):
    gsc = "3,4,2,3,4,3,3,3,2,4,3,3,2,0"
    assert main.main(["estimate", "100", "--gsc", gsc, "--productivity", "8"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["value_adjustment_factor"] == pytest.approx(1.04)
    assert out["adjusted_function_points"] == pytest.approx(104.0)


def test_estimate_command_reports_bad_vector(capsys):
    assert main.main(["estimate", "100", "--gsc", "1,2,3", "--productivity", "8"]) == 2
    assert capsys.readouterr().out == ""


def test_trend_command(tmp_path, capsys):
    path = tmp_path / "snaps.json"
    path.write_text(json.dumps([
        {"timestamp": "2026-01-03T00:00:00", "value": 120},
        {"timestamp": "2026-01-01T00:00:00", "value": 100},
        {"timestamp": "2026-01-02T00:00:00", "value": 110},
    ]))
    assert main.main(["trend", str(path), "--periods", "2"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["analysis"]["trend"] == "increasing"
    assert out["analysis"]["forecasted_value"] == pytest.approx(140.0)
    assert [p["value"] for p in out["forecast"]] == pytest.approx([130.0, 140.0])
    assert out["anomalies"] == []


def test_trend_command_needs_two_snapshots(tmp_path):
    path = tmp_path / "one.json"
    path.write_text(json.dumps([{"timestamp": "2026-01-01T00:00:00", "value": 1}]))
    assert main.main(["trend", str(path)]) == 2
