"""Pipeline orchestrator: wires the two stages together.

Flow:
    jd_text
      └─ extract(jd_text)                  → extraction result (schema-complete on failure)
              ↓
         compare_jd(extracted, profile)    → comparison result (grey fallback on failure)
              ↓
         AnalysisResult(extracted, comparison, usage)

The stages run strictly in sequence: comparison consumes the extraction.
"""

import logging
from typing import Any, Mapping

from models.responses import AnalysisResult, UsageRecord
from models.schemas.candidate_profile import CandidateProfile
from services.pipeline.comparator import compare_jd
from services.pipeline.extractor import extract

logger = logging.getLogger(__name__)


async def analyze(
    jd_text: str,
    profile: CandidateProfile | Mapping[str, Any] | None = None,
) -> AnalysisResult:
    """Run extraction then comparison for one job description."""
    extraction = await extract(jd_text)
    comparison = await compare_jd(extraction.data, profile)

    total = extraction.usage.total_tokens + comparison.usage.total_tokens
    logger.info(
        "Analysis done: eligibility=%s, tokens=%d",
        comparison.data.get("overall_eligibility"),
        total,
    )
    return AnalysisResult(
        extracted=extraction.data,
        comparison=comparison.data,
        usage=UsageRecord(total_tokens=total),
    )
