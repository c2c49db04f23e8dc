#!/usr/bin/env python
"""
Assessment Runner — Analyze Sleep Hygiene Answers from the Terminal

Loads a fact record from a JSON file (or uses the benign baseline with
overrides), runs the inference engine and prints ranked recommendations.

Usage:
    python scripts/run_assessment.py answers.json
    python scripts/run_assessment.py --set sleep_duration=5 --set stress_level=high
    python scripts/run_assessment.py answers.json --top 3 --export report.json
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import argparse
import json
from pathlib import Path

from pydantic import ValidationError

from sleep_advisor.facts import FactRecord
from sleep_advisor.reports import generate_filename, generate_json_report
from sleep_advisor.rules import inference_engine


def parse_override(raw: str):
    """Parse KEY=VALUE; numeric values become numbers."""
    key, sep, value = raw.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{raw}'")
    try:
        return key, json.loads(value)
    except json.JSONDecodeError:
        return key, value


def non_negative_int(raw: str) -> int:
    value = int(raw)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def load_facts(path, overrides) -> FactRecord:
    """Build the fact record from a file and/or baseline overrides."""
    if path is None:
        return FactRecord.benign(**overrides)
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    data.update(overrides)
    return FactRecord(**data)


def print_result(facts: FactRecord, top: int = None):
    result = inference_engine.analyze(facts)
    recommendations = (
        inference_engine.top_priority(result, top) if top is not None else result.recommendations
    )

    print("=" * 60)
    print("SLEEP HYGIENE ASSESSMENT")
    print("=" * 60)
    print(f"Rules evaluated: {result.meta.total_rules_evaluated}")
    print(f"Rules matched:   {result.meta.rules_matched}")
    print(f"Inference time:  {result.meta.inference_time_ms} ms")
    print("=" * 60)

    if not recommendations:
        print("\n[OK] No issues found. Keep up your current habits.")

    for rec in recommendations:
        print(f"\n[{rec.id}] {rec.category.value.upper()} (priority {rec.priority}, "
              f"confidence {rec.confidence:.0%})")
        print(f"   {rec.text}")
        print(f"   Why: {rec.explanation}")
        print(f"   Rules: {', '.join(rec.fired_rules)}")

    if inference_engine.requires_medical_attention(result):
        print()
        print("[!] You've indicated a medical sleep condition. These recommendations")
        print("    cannot replace professional care; please consult a healthcare provider.")

    return result


def main():
    parser = argparse.ArgumentParser(
        description="Analyze sleep hygiene answers and print recommendations"
    )
    parser.add_argument(
        "facts",
        nargs="?",
        default=None,
        help="JSON file with the 13 answers (default: benign baseline)"
    )
    parser.add_argument(
        "--set", "-s",
        dest="overrides",
        action="append",
        type=parse_override,
        default=[],
        metavar="KEY=VALUE",
        help="Override one answer (repeatable)"
    )
    parser.add_argument(
        "--top", "-t",
        type=non_negative_int,
        default=None,
        help="Only show the N highest-priority recommendations"
    )
    parser.add_argument(
        "--export", "-e",
        nargs="?",
        const="",
        default=None,
        metavar="PATH",
        help="Write the JSON export (default name: sleepsense-analysis-YYYY-MM-DD.json)"
    )

    args = parser.parse_args()

    try:
        facts = load_facts(args.facts, dict(args.overrides))
    except ValidationError as e:
        print(f"[ERROR] Invalid answers:\n{e}")
        sys.exit(2)

    result = print_result(facts, args.top)

    if args.export is not None:
        envelope = inference_engine.export_record(facts, result)
        target = Path(args.export or generate_filename(envelope.timestamp))
        target.write_text(generate_json_report(envelope), encoding="utf-8")
        print(f"\n[OK] Export written to {target}")


if __name__ == "__main__":
    main()
