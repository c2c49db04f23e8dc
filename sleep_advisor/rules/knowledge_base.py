"""
Rule Knowledge Base — Condition → Advice Catalog

This is where the sleep hygiene RULES live. Each rule pairs a pure
predicate over a FactRecord with one piece of advice and an explanation
generator that cites the user's own answers.

Constraints:
- Exactly 18 rules, R1..R18, fixed order (evaluation order)
- Rule IDs are stable: the UI and exported audit trails reference them
- Catalog is an immutable tuple of frozen records, built once at import
- Priority is an integer 1-10 (10 = most important)

Condition complexity is DECLARED by the rule author (and_joins / or_joins
describe how the condition is written), never inferred from the predicate.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from sleep_advisor.facts import FactRecord


# Rule whose firing means "see a healthcare professional"
MEDICAL_ATTENTION_RULE_ID = "R13"

MIN_PRIORITY = 1
MAX_PRIORITY = 10


def estimate_condition_complexity(and_joins: int = 0, or_joins: int = 0) -> int:
    """
    Estimate how many sub-conditions a rule's condition covers.

    Heuristic: conjunctions each add a condition, a pair of alternatives
    counts as one more. Floored at 1.

        estimate = and_joins + 1 + or_joins // 2

    This is an estimate of the condition's authored shape, NOT a count
    of facts that actually matched. It only feeds the confidence score.
    """
    return max(1, and_joins + 1 + or_joins // 2)


@dataclass(frozen=True)
class Rule:
    """
    One condition → advice rule.

    Attributes:
        id: Stable identifier ("R1".."R18")
        priority: Importance weight, 1-10
        condition: Pure predicate over the fact record
        recommendation: Advice text (also the deduplication key)
        explanation: Pure function rendering the "why" for this user
        and_joins: Number of AND joins in the condition as authored
        or_joins: Number of OR joins in the condition as authored
    """
    id: str
    priority: int
    condition: Callable[[FactRecord], bool]
    recommendation: str
    explanation: Callable[[FactRecord], str]
    and_joins: int = 0
    or_joins: int = 0

    def __post_init__(self):
        if not MIN_PRIORITY <= self.priority <= MAX_PRIORITY:
            raise ValueError(
                f"Rule {self.id}: priority must be {MIN_PRIORITY}-{MAX_PRIORITY}, got {self.priority}"
            )

    @property
    def complexity(self) -> int:
        """Estimated number of sub-conditions (see estimate_condition_complexity)."""
        return estimate_condition_complexity(self.and_joins, self.or_joins)


# ============================================================================
# Explanation helpers (only where the text depends on the answers)
# ============================================================================

def _format_number(value: float) -> str:
    """Render a user-supplied number as entered: 5.0 -> "5", 6.1234567 -> "6.1234567"."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _describe_medical_issue(facts: FactRecord) -> str:
    condition = "sleep apnea" if facts.medical_issues == "sleep_apnea" else "insomnia"
    return (
        f"You've indicated {condition}, which requires professional medical evaluation "
        f"and treatment. This app provides general advice but cannot replace medical care."
    )


def _describe_environment(facts: FactRecord) -> str:
    issues = []
    if facts.noise_level == "high":
        issues.append("high noise")
    if facts.light_level == "bright":
        issues.append("bright light")
    if facts.room_temperature > 24:
        issues.append(f"warm temperature ({_format_number(facts.room_temperature)}°C)")
    return (
        f"Your bedroom environment has suboptimal conditions: {', '.join(issues)}. "
        f"Creating an ideal sleep environment is fundamental to good sleep hygiene."
    )


# ============================================================================
# The catalog
# ============================================================================

RULES: Tuple[Rule, ...] = (
    Rule(
        id="R1",
        priority=9,
        condition=lambda f: f.bedtime_consistent == "no",
        recommendation="Try going to bed and waking up at the same time every day (±30 minutes).",
        explanation=lambda f: (
            "Your irregular bedtime schedule disrupts your circadian rhythm. "
            "Consistency is key for quality sleep."
        ),
    ),
    Rule(
        id="R2",
        priority=10,
        condition=lambda f: f.sleep_duration < 7,
        recommendation="Aim for 7–9 hours of sleep nightly.",
        explanation=lambda f: (
            f"You're currently getting {_format_number(f.sleep_duration)} hours of sleep, which is below the "
            f"recommended 7-9 hours for optimal health and cognitive function."
        ),
    ),
    Rule(
        id="R3",
        priority=8,
        condition=lambda f: f.caffeine_after_3pm == "yes",
        recommendation="Avoid caffeine after 3 PM; switch to decaf in the afternoon.",
        explanation=lambda f: (
            "Caffeine has a half-life of 5-6 hours. Consuming it after 3 PM can significantly "
            "interfere with your ability to fall asleep."
        ),
    ),
    Rule(
        id="R4",
        priority=7,
        condition=lambda f: f.alcohol_before_bed == "yes",
        recommendation="Avoid alcohol within 3 hours of bedtime — it fragments sleep.",
        explanation=lambda f: (
            "While alcohol may help you fall asleep initially, it disrupts REM sleep and causes "
            "fragmented, poor-quality sleep later in the night."
        ),
    ),
    Rule(
        id="R5",
        priority=8,
        condition=lambda f: f.late_screen_time >= 60,
        recommendation="Stop using screens at least 60 minutes before bed or use blue-light filters.",
        explanation=lambda f: (
            f"You're using screens {f.late_screen_time} minutes before bed. Blue light from screens "
            f"suppresses melatonin production, making it harder to fall asleep."
        ),
    ),
    Rule(
        id="R6",
        priority=7,
        condition=lambda f: f.daytime_nap_minutes >= 45,
        recommendation="Limit naps to 20–30 minutes and avoid late-afternoon naps.",
        explanation=lambda f: (
            f"Your {f.daytime_nap_minutes}-minute naps may be reducing your sleep drive. "
            f"Long naps can interfere with nighttime sleep quality."
        ),
    ),
    Rule(
        id="R7",
        priority=6,
        condition=lambda f: f.exercise_within_3hrs_of_bed == "yes",
        recommendation="Finish vigorous exercise at least 3 hours before bedtime.",
        explanation=lambda f: (
            "Exercise raises body temperature and adrenaline levels. Your body needs time to "
            "cool down and relax before sleep."
        ),
    ),
    Rule(
        id="R8",
        priority=8,
        condition=lambda f: f.noise_level == "high",
        recommendation="Use earplugs or white noise to reduce disruptive sounds.",
        explanation=lambda f: (
            "High noise levels can prevent you from reaching deep sleep stages and cause "
            "frequent awakenings throughout the night."
        ),
    ),
    Rule(
        id="R9",
        priority=8,
        condition=lambda f: f.light_level == "bright",
        recommendation="Make the bedroom dark; blackout curtains or eye masks help.",
        explanation=lambda f: (
            "Bright light in your bedroom suppresses melatonin production. Darkness signals "
            "your brain that it's time to sleep."
        ),
    ),
    Rule(
        id="R10",
        priority=9,
        condition=lambda f: f.stress_level == "high",
        recommendation="Practice relaxation (deep breathing, progressive muscle relaxation) before bed.",
        explanation=lambda f: (
            "High stress levels activate your fight-or-flight response, making it difficult to "
            "relax and fall asleep. Relaxation techniques can help calm your nervous system."
        ),
    ),
    Rule(
        id="R11",
        priority=7,
        condition=lambda f: f.room_temperature > 24,
        recommendation="Keep bedroom temperature between 16–20°C for better sleep.",
        explanation=lambda f: (
            f"Your room temperature of {_format_number(f.room_temperature)}°C is too warm. Core body temperature "
            f"needs to drop for sleep onset. The ideal sleep temperature is 16-20°C."
        ),
    ),
    Rule(
        id="R12",
        priority=6,
        condition=lambda f: f.uses_bed_for_work == "yes",
        recommendation="Use the bed only for sleep and intimacy; avoid working in bed.",
        explanation=lambda f: (
            "Using your bed for work creates a mental association between your bed and "
            "alertness, making it harder to relax and sleep there."
        ),
    ),
    Rule(
        id="R13",
        priority=10,
        condition=lambda f: f.medical_issues == "sleep_apnea" or f.medical_issues == "insomnia",
        recommendation="Consult a healthcare professional for diagnosis and treatment options.",
        explanation=_describe_medical_issue,
        or_joins=1,
    ),
    Rule(
        id="R14",
        priority=6,
        condition=lambda f: f.bedtime_consistent == "no" and f.light_level != "dark",
        recommendation="Increase daytime bright light exposure and dim lights in the evening.",
        explanation=lambda f: (
            "Your inconsistent schedule combined with improper light exposure is confusing your "
            "circadian rhythm. Bright light during the day and dim light in evening helps "
            "regulate your sleep-wake cycle."
        ),
        and_joins=1,
    ),
    Rule(
        id="R15",
        priority=9,
        condition=lambda f: f.late_screen_time >= 60 and f.caffeine_after_3pm == "yes",
        recommendation=(
            "Both screen exposure and late caffeine are harming your sleep — "
            "avoid both in the evening."
        ),
        explanation=lambda f: (
            f"You have two major sleep disruptors working against you: screens "
            f"{f.late_screen_time} minutes before bed AND afternoon caffeine. Eliminating both "
            f"will significantly improve your sleep quality."
        ),
        and_joins=1,
    ),
    Rule(
        id="R16",
        priority=9,
        condition=lambda f: f.sleep_duration < 6 and f.stress_level == "high",
        recommendation=(
            "Combine sleep extension strategies with stress management and consider "
            "counseling if persistent."
        ),
        explanation=lambda f: (
            f"You're only getting {_format_number(f.sleep_duration)} hours of sleep and experiencing high stress. "
            f"This creates a vicious cycle: stress prevents sleep, and lack of sleep increases "
            f"stress. Professional support may be beneficial."
        ),
        and_joins=1,
    ),
    Rule(
        id="R17",
        priority=8,
        condition=lambda f: f.daytime_nap_minutes >= 45 and f.sleep_duration < 7,
        recommendation="Reduce long naps; improving night sleep should reduce daytime sleepiness.",
        explanation=lambda f: (
            f"Your {f.daytime_nap_minutes}-minute naps are likely compensating for only "
            f"{_format_number(f.sleep_duration)} hours of night sleep. This creates a cycle where naps reduce "
            f"nighttime sleep drive."
        ),
        and_joins=1,
    ),
    Rule(
        id="R18",
        priority=8,
        condition=lambda f: (
            f.noise_level == "high" or f.light_level == "bright" or f.room_temperature > 24
        ),
        recommendation="Address bedroom environment: optimize noise, light, and temperature.",
        explanation=_describe_environment,
        or_joins=2,
    ),
)


def get_rule_by_id(rule_id: str) -> Optional[Rule]:
    """Return the catalog rule with this id, or None."""
    for rule in RULES:
        if rule.id == rule_id:
            return rule
    return None


def get_all_rule_ids() -> List[str]:
    """All rule ids in catalog (evaluation) order."""
    return [rule.id for rule in RULES]
