"""Comparator output: per-field eligibility colors against the candidate profile."""

from enum import Enum
from typing import Any

from pydantic import BaseModel


class Color(str, Enum):
    """Four-bucket eligibility taxonomy."""
    RED = "red"  # not eligible
    YELLOW = "yellow"  # eligible but away from preferred
    GREY = "grey"  # informational / unknown
    GREEN = "green"  # eligible and preferred


class FieldComparison(BaseModel):
    color: Color
    explanation: str
    evidence: Any = None  # raw value from the extraction, or None if missing


class ComparisonResult(BaseModel):
    """Structured output of the comparator.

    ``fields`` only holds the fields the classifier chose to compare, so it
    is usually a subset of the extraction keys.
    """
    overall_eligibility: Color = Color.GREY
    summary_explanation: str = ""
    fields: dict[str, FieldComparison] = {}


COMPARATOR_FAILED_SUMMARY = "Comparator failed to return a valid structured result."

COMPARISON_FALLBACK = ComparisonResult(
    overall_eligibility=Color.GREY,
    summary_explanation=COMPARATOR_FAILED_SUMMARY,
    fields={},
).model_dump(mode="json")
