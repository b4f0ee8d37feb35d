"""Pydantic contracts shared by the extraction and comparison stages."""

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.comparison_result import Color, ComparisonResult, FieldComparison
from models.schemas.field_schema import EXTRACTION_SCHEMA, FieldKind

__all__ = [
    "CandidateProfile",
    "Color",
    "ComparisonResult",
    "FieldComparison",
    "EXTRACTION_SCHEMA",
    "FieldKind",
]
