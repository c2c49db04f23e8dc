"""
Sleep Hygiene Advisor — rule-based recommendations from self-reported habits.
"""

__version__ = "1.0.0"
