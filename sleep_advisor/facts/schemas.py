"""
Fact Schemas — Self-Reported Sleep Hygiene Answers

One FactRecord is the complete answer set collected from a user.
All 13 fields are required; each has a small enumerated or numeric domain.

Constraints:
- Immutable once constructed (frozen model)
- Domains are checked when the record is BUILT (API body, CLI file);
  the inference engine trusts the record it is handed
"""

from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field


YesNo = Literal["yes", "no"]
Level = Literal["low", "medium", "high"]
LightLevel = Literal["dark", "dim", "bright"]
MedicalIssue = Literal["none", "insomnia", "sleep_apnea", "other"]


# Baseline answers with no sleep-hygiene problem flagged
BENIGN_FACTS: Dict[str, Any] = {
    "bedtime_consistent": "yes",
    "sleep_duration": 8.0,
    "caffeine_after_3pm": "no",
    "alcohol_before_bed": "no",
    "late_screen_time": 30,
    "daytime_nap_minutes": 0,
    "exercise_within_3hrs_of_bed": "no",
    "noise_level": "low",
    "light_level": "dark",
    "stress_level": "low",
    "room_temperature": 20.0,
    "uses_bed_for_work": "no",
    "medical_issues": "none",
}


class FactRecord(BaseModel):
    """
    Sleep hygiene fact record (engine input).

    Time fields: sleep_duration in hours, screen/nap time in minutes.
    Temperature in °C.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    bedtime_consistent: YesNo = Field(..., description="Same bed/wake time every day")
    sleep_duration: float = Field(..., ge=0, description="Average nightly sleep (hours)")
    caffeine_after_3pm: YesNo
    alcohol_before_bed: YesNo
    late_screen_time: int = Field(..., ge=0, description="Screen use before bed (minutes)")
    daytime_nap_minutes: int = Field(..., ge=0, description="Typical daytime nap (minutes)")
    exercise_within_3hrs_of_bed: YesNo
    noise_level: Level
    light_level: LightLevel
    stress_level: Level
    room_temperature: float = Field(..., description="Bedroom temperature (°C)")
    uses_bed_for_work: YesNo
    medical_issues: MedicalIssue = Field(..., description="Sleep-related medical condition")

    @classmethod
    def benign(cls, **overrides: Any) -> "FactRecord":
        """
        Build a record from the benign baseline, replacing selected answers.

        Example:
            FactRecord.benign(sleep_duration=5, stress_level="high")
        """
        return cls(**{**BENIGN_FACTS, **overrides})
