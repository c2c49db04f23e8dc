"""
Facts Module — Engine Input Contract

Public API:
- FactRecord: The 13-field self-reported answer set
- BENIGN_FACTS: Baseline answers that trigger no rule
"""

from .schemas import (
    FactRecord,
    BENIGN_FACTS,
    YesNo,
    Level,
    LightLevel,
    MedicalIssue,
)

__all__ = [
    "FactRecord",
    "BENIGN_FACTS",
    "YesNo",
    "Level",
    "LightLevel",
    "MedicalIssue",
]
