"""Tests for the pipeline orchestrator and stage registry."""

import json

import httpx
import pytest

from fakes import json_reply
from models.responses import AnalysisResult
from models.schemas.candidate_profile import MY_PROFILE
from models.schemas.comparison_result import COMPARISON_FALLBACK
from models.schemas.field_schema import EXTRACTION_SCHEMA
from services.pipeline import stage_registry
from services.pipeline.comparator import ComparatorStage
from services.pipeline.extractor import JDExtractorStage
from services.sample_data import SAMPLE_COMPARISON, SAMPLE_EXTRACTED
from services.validators import is_comparison_struct

SAMPLE_JD = "Junior Python Developer in Vancouver. $65,000. 1 year of experience."

EXTRACTED = {"title": "Junior Python Developer", "location": "Vancouver", "salary_min_cad": 65000}
COMPARED = {
    "overall_eligibility": "green",
    "summary_explanation": "Matches location and salary.",
    "fields": {"location": {"color": "green", "explanation": "'Vancouver' is preferred", "evidence": "Vancouver"}},
}


@pytest.fixture
def register_stages(make_client):
    def _register(extract_replies, compare_replies):
        ext_client, ext_endpoint = make_client(*extract_replies, max_retries=2)
        cmp_client, cmp_endpoint = make_client(
            *compare_replies,
            validator=is_comparison_struct,
            on_exhausted="fallback",
            fallback=COMPARISON_FALLBACK,
        )
        stage_registry.register("extractor", JDExtractorStage(ext_client))
        stage_registry.register("comparator", ComparatorStage(cmp_client, profile=MY_PROFILE))
        return ext_endpoint, cmp_endpoint

    return _register


class TestAnalyze:
    @pytest.mark.asyncio
    async def test_extraction_feeds_comparison(self, register_stages):
        from services.pipeline.orchestrator import analyze

        _, cmp_endpoint = register_stages(
            [json_reply(EXTRACTED, usage={"total_tokens": 100})],
            [json_reply(COMPARED, usage={"total_tokens": 50})],
        )

        result = await analyze(SAMPLE_JD)

        assert isinstance(result, AnalysisResult)
        assert result.extracted == EXTRACTED
        assert result.comparison == COMPARED
        assert result.usage.total_tokens == 150
        prompt = json.loads(cmp_endpoint.requests[0].content)["messages"][1]["content"]
        assert '"salary_min_cad": 65000' in prompt

    @pytest.mark.asyncio
    async def test_total_failure_degrades_both_stages(self, register_stages):
        from services.pipeline.orchestrator import analyze

        _, cmp_endpoint = register_stages(
            [httpx.ConnectError("offline")],
            [httpx.ConnectError("offline")],
        )

        result = await analyze(SAMPLE_JD)

        assert list(result.extracted) == list(EXTRACTION_SCHEMA)
        assert result.comparison == COMPARISON_FALLBACK
        assert result.usage.total_tokens == 0
        # The comparator still runs on the empty extraction.
        assert len(cmp_endpoint.requests) == 1


class TestStageRegistry:
    def test_unknown_stage(self):
        with pytest.raises(ValueError):
            stage_registry.get_stage("judge")

    def test_stage_cached(self):
        assert stage_registry.get_stage("extractor") is stage_registry.get_stage("extractor")

    def test_config_from_settings(self):
        from config import settings

        extractor = stage_registry.get_stage("extractor")
        comparator = stage_registry.get_stage("comparator")

        assert extractor.client.config.model == settings.extraction_model
        assert extractor.client.config.max_retries == settings.extraction_max_retries
        assert extractor.client.config.on_exhausted == "raise"
        assert comparator.client.config.model == settings.compare_model
        assert comparator.client.config.max_retries == settings.compare_max_retries
        assert comparator.client.config.on_exhausted == "fallback"

    @pytest.mark.asyncio
    async def test_sample_mode_end_to_end(self, monkeypatch):
        from config import settings
        from services.pipeline.orchestrator import analyze

        monkeypatch.setattr(settings, "use_sample_data", True)
        monkeypatch.setattr(settings, "sample_delay_seconds", 0.0)

        result = await analyze(SAMPLE_JD)

        assert result.extracted == SAMPLE_EXTRACTED
        assert result.comparison == SAMPLE_COMPARISON
        assert result.usage.total_tokens == 0

    def test_profile_from_file(self, monkeypatch, tmp_path):
        from config import settings

        path = tmp_path / "profile.json"
        path.write_text(json.dumps({"requirements": {"country": "Germany"}}), encoding="utf-8")
        monkeypatch.setattr(settings, "candidate_profile_path", str(path))

        comparator = stage_registry.get_stage("comparator")

        assert comparator.profile.requirements.country == "Germany"
        assert comparator.profile.preferences.preferred_locations == []
