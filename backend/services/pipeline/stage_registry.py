"""Lazy stage registry for the two-stage pipeline.

Settings are read here, once per stage, and turned into explicit
CompletionConfig values; the stages and clients never look at settings.
"""

import logging
from typing import Literal

from config import settings
from services.completion_client import CompletionClient, CompletionConfig
from services.pipeline.base import BasePipelineStage

logger = logging.getLogger(__name__)

_registry: dict[str, BasePipelineStage] = {}


def completion_config(
    model: str,
    max_retries: int,
    on_exhausted: Literal["raise", "fallback"],
) -> CompletionConfig:
    return CompletionConfig(
        model=model,
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        max_retries=max_retries,
        retry_delay_seconds=settings.retry_delay_seconds,
        on_exhausted=on_exhausted,
        use_sample_data=settings.use_sample_data,
        sample_delay_seconds=settings.sample_delay_seconds,
        timeout_seconds=settings.request_timeout_seconds,
    )


def _create_stage(name: str) -> BasePipelineStage:
    """Factory: create a stage by name with deferred imports."""
    if name == "extractor":
        from services.pipeline.extractor import JDExtractorStage
        from services.sample_data import SAMPLE_EXTRACTED
        from services.validators import is_extraction_struct

        client = CompletionClient(
            completion_config(settings.extraction_model, settings.extraction_max_retries, "raise"),
            is_extraction_struct,
            sample_result=SAMPLE_EXTRACTED,
        )
        return JDExtractorStage(client)
    elif name == "comparator":
        from models.schemas.candidate_profile import load_profile
        from models.schemas.comparison_result import COMPARISON_FALLBACK
        from services.pipeline.comparator import ComparatorStage
        from services.sample_data import SAMPLE_COMPARISON
        from services.validators import is_comparison_struct

        client = CompletionClient(
            completion_config(settings.compare_model, settings.compare_max_retries, "fallback"),
            is_comparison_struct,
            fallback=COMPARISON_FALLBACK,
            sample_result=SAMPLE_COMPARISON,
        )
        return ComparatorStage(client, profile=load_profile(settings.candidate_profile_path))
    else:
        raise ValueError(f"Unknown stage: {name}")


def get_stage(name: str) -> BasePipelineStage:
    """Get a stage by name, creating it on first access."""
    if name not in _registry:
        logger.info("Creating pipeline stage: %s", name)
        _registry[name] = _create_stage(name)
    return _registry[name]


def register(name: str, stage: BasePipelineStage) -> None:
    """Install a prebuilt stage under a name, replacing any existing one."""
    _registry[name] = stage


def clear() -> None:
    """Drop all stages so the next access re-reads settings. Useful for testing."""
    _registry.clear()
