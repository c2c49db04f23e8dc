"""
Fact Record Tests

Tests verify:
- All 13 answers required
- Enumerated and numeric domains enforced at construction
- Record is immutable
- Benign baseline + overrides
"""

import pytest
from pydantic import ValidationError

from sleep_advisor.facts import BENIGN_FACTS, FactRecord


class TestDomains:
    """Test field domain validation."""

    def test_baseline_is_valid(self):
        facts = FactRecord(**BENIGN_FACTS)
        assert facts.sleep_duration == 8.0

    def test_missing_field_rejected(self):
        data = dict(BENIGN_FACTS)
        del data["medical_issues"]
        with pytest.raises(ValidationError):
            FactRecord(**data)

    @pytest.mark.parametrize("field,value", [
        ("bedtime_consistent", "sometimes"),
        ("noise_level", "extreme"),
        ("light_level", "pitch_black"),
        ("stress_level", "none"),
        ("medical_issues", "narcolepsy"),
        ("sleep_duration", -1),
        ("late_screen_time", -5),
        ("daytime_nap_minutes", -1),
    ])
    def test_out_of_domain_rejected(self, field, value):
        with pytest.raises(ValidationError):
            FactRecord.benign(**{field: value})

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            FactRecord.benign(caffeine_cups=4)

    def test_negative_temperature_allowed(self):
        """Temperature has no lower bound (°C)."""
        assert FactRecord.benign(room_temperature=-2).room_temperature == -2


class TestImmutability:
    """Fact records cannot change once supplied."""

    def test_frozen(self):
        facts = FactRecord.benign()
        with pytest.raises(ValidationError):
            facts.sleep_duration = 4


class TestBenign:
    """Test the baseline factory."""

    def test_overrides_applied(self):
        facts = FactRecord.benign(sleep_duration=5, stress_level="high")
        assert facts.sleep_duration == 5
        assert facts.stress_level == "high"
        assert facts.noise_level == "low"

    def test_baseline_not_mutated(self):
        FactRecord.benign(sleep_duration=3)
        assert BENIGN_FACTS["sleep_duration"] == 8.0
