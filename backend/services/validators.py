"""Structural checks deciding whether a parsed response is accepted or retried."""

from typing import Any


def is_extraction_struct(parsed: Any) -> bool:
    # Missing schema keys are tolerated here; only the exhaustion fallback is schema-complete.
    return isinstance(parsed, dict)


def is_comparison_struct(parsed: Any) -> bool:
    if not isinstance(parsed, dict):
        return False
    if "overall_eligibility" not in parsed or "fields" not in parsed:
        return False
    return isinstance(parsed["fields"], dict)
