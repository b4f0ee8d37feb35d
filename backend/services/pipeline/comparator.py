"""Stage 2: Comparator - classify extracted JD fields against the candidate profile.

Each compared field gets one of four colors (red / yellow / grey / green).
The client behind this stage is configured with the grey fallback, so a
failed comparison still resolves.
"""

import logging
from typing import Any, Mapping

from models.responses import CompletionResult
from models.schemas.candidate_profile import MY_PROFILE, CandidateProfile
from services.completion_client import CompletionClient
from services.pipeline.base import BasePipelineStage
from services.pipeline.stage_registry import get_stage
from services.prompt_builder import COMPARE_SYSTEM, build_compare_prompt

logger = logging.getLogger(__name__)


class ComparatorStage(BasePipelineStage):
    stage_name = "comparator"

    def __init__(self, client: CompletionClient, profile: CandidateProfile = MY_PROFILE) -> None:
        super().__init__(client)
        self.profile = profile

    async def predict(self, **kwargs: Any) -> CompletionResult:
        extracted: Mapping[str, Any] = kwargs["extracted"]
        profile: CandidateProfile | Mapping[str, Any] | None = kwargs.get("profile")
        if profile is None:
            profile = self.profile

        logger.info("Comparing %d extracted fields using %s", len(extracted), self.model)
        prompt = build_compare_prompt(extracted, profile)
        return await self.client.complete(COMPARE_SYSTEM, prompt)


async def compare_jd(
    extracted: Mapping[str, Any],
    profile: CandidateProfile | Mapping[str, Any] | None = None,
) -> CompletionResult:
    """Classify an extraction result. Uses the configured profile when none is given."""
    return await get_stage("comparator").predict(extracted=extracted, profile=profile)
