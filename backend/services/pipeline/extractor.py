"""Stage 1: JD Extractor - structured fields from free-text job postings.

The model is asked for one JSON object following the field schema. Whatever
object it returns is accepted as-is; when every attempt fails the stage
returns the schema-complete empty record instead.
"""

import logging
from typing import Any, Mapping

from models.responses import CompletionResult, UsageRecord
from models.schemas.field_schema import EXTRACTION_SCHEMA, FieldKind, coerce_schema, empty_record
from services.completion_client import CompletionClient, CompletionExhaustedError
from services.pipeline.base import BasePipelineStage
from services.pipeline.stage_registry import get_stage
from services.prompt_builder import EXTRACTION_SYSTEM, build_extraction_prompt

logger = logging.getLogger(__name__)


class JDExtractorStage(BasePipelineStage):
    stage_name = "extractor"

    def __init__(
        self,
        client: CompletionClient,
        schema: Mapping[str, FieldKind | str] = EXTRACTION_SCHEMA,
    ) -> None:
        super().__init__(client)
        self.schema = coerce_schema(schema)

    async def predict(self, **kwargs: Any) -> CompletionResult:
        jd_text: str = kwargs["jd_text"]

        if not jd_text or not jd_text.strip():
            logger.warning("Empty job description, skipping extraction")
            return self._fallback()

        prompt = build_extraction_prompt(jd_text, self.schema)
        try:
            return await self.client.complete(EXTRACTION_SYSTEM, prompt)
        except CompletionExhaustedError as e:
            logger.error("Extraction failed, returning empty schema: %s", e)
            return self._fallback()

    def _fallback(self) -> CompletionResult:
        return CompletionResult(data=empty_record(self.schema), usage=UsageRecord())


async def extract(jd_text: str) -> CompletionResult:
    """Primary entry point for extraction. Always resolves with a result."""
    return await get_stage("extractor").predict(jd_text=jd_text)
