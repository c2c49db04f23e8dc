"""
Reporting Layer Tests

Tests verify:
- JSON export is valid and complete (timestamp, input, analysis)
- Contract field names in the analysis section
- Smart filename pattern
"""

import json
from datetime import datetime, timezone

from sleep_advisor.facts import FactRecord
from sleep_advisor.reports import generate_filename, generate_json_report
from sleep_advisor.rules import ExportEnvelope, inference_engine


def create_test_envelope() -> ExportEnvelope:
    """Create a sample export envelope for testing."""
    facts = FactRecord.benign(sleep_duration=5, stress_level="high")
    result = inference_engine.analyze(facts)
    return ExportEnvelope(
        timestamp=datetime(2026, 1, 11, 17, 30, 0, tzinfo=timezone.utc),
        input=facts,
        analysis=result,
    )


class TestJSONExport:
    """Test JSON export generation."""

    def test_generates_valid_json(self):
        content = generate_json_report(create_test_envelope())
        data = json.loads(content)
        assert set(data) == {"timestamp", "input", "analysis"}

    def test_pretty_printed(self):
        content = generate_json_report(create_test_envelope())
        assert '\n  "input"' in content

    def test_input_preserved(self):
        data = json.loads(generate_json_report(create_test_envelope()))
        assert data["input"]["sleep_duration"] == 5.0
        assert data["input"]["stress_level"] == "high"
        assert len(data["input"]) == 13

    def test_analysis_uses_contract_names(self):
        data = json.loads(generate_json_report(create_test_envelope()))
        analysis = data["analysis"]

        assert [f["ruleId"] for f in analysis["firedRules"]] == ["R2", "R10", "R16"]
        assert analysis["meta"]["totalRulesEvaluated"] == 18
        assert analysis["meta"]["rulesMatched"] == 3
        first = analysis["recommendations"][0]
        assert first["id"] == "REC-1"
        assert first["firedRules"] == ["R2"]
        assert first["text"] == "Aim for 7–9 hours of sleep nightly."

    def test_timestamp_is_utc_iso(self):
        data = json.loads(generate_json_report(create_test_envelope()))
        assert data["timestamp"].startswith("2026-01-11T17:30:00")

    def test_naive_timestamp_assumed_utc(self):
        source = create_test_envelope()
        envelope = ExportEnvelope(
            timestamp=datetime(2026, 1, 11, 17, 30),
            input=source.input,
            analysis=source.analysis,
        )
        assert envelope.timestamp.tzinfo == timezone.utc


class TestFilename:
    """Test download filename generation."""

    def test_filename_pattern(self):
        ts = datetime(2026, 1, 11, 17, 30, 0, tzinfo=timezone.utc)
        assert generate_filename(ts) == "sleepsense-analysis-2026-01-11.json"

    def test_custom_extension(self):
        ts = datetime(2026, 1, 11, 9, 5, 0, tzinfo=timezone.utc)
        assert generate_filename(ts, "txt") == "sleepsense-analysis-2026-01-11.txt"
