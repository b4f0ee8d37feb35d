"""Tests for Stage 1: JD Extractor."""

import httpx
import pytest

from fakes import chat_reply, json_reply
from models.schemas.field_schema import EXTRACTION_SCHEMA
from services.pipeline import stage_registry
from services.pipeline.extractor import JDExtractorStage, extract

SAMPLE_JD = """
Junior Backend Developer - Acme Corp
Vancouver, BC (hybrid)
$60,000 - $70,000 CAD

Requirements:
- 0-2 years of experience
- Python, FastAPI, PostgreSQL
"""


class TestJDExtractorStage:
    @pytest.mark.asyncio
    async def test_returns_model_output_as_is(self, make_client):
        client, endpoint = make_client(json_reply({"title": "Junior Backend Developer"}, usage={"total_tokens": 99}))
        stage = JDExtractorStage(client)

        result = await stage.predict(jd_text=SAMPLE_JD)

        # Schema-incomplete output is accepted unchanged.
        assert result.data == {"title": "Junior Backend Developer"}
        assert result.usage.total_tokens == 99
        prompt = endpoint.bodies[0]["messages"][1]["content"]
        assert SAMPLE_JD.strip() in prompt

    @pytest.mark.asyncio
    async def test_transport_failure_every_attempt(self, make_client, sleep_recorder):
        client, endpoint = make_client(httpx.ConnectError("offline"), max_retries=2)
        stage = JDExtractorStage(client)

        result = await stage.predict(jd_text=SAMPLE_JD)

        assert set(result.data) == set(EXTRACTION_SCHEMA)
        for name, kind in EXTRACTION_SCHEMA.items():
            assert result.data[name] == ([] if kind.is_list else None)
        assert result.usage.total_tokens == 0
        assert len(endpoint.requests) == 2
        assert sleep_recorder.calls == [0.5]

    @pytest.mark.asyncio
    async def test_empty_output_custom_schema(self, make_client):
        client, _ = make_client(chat_reply(""), max_retries=2)
        stage = JDExtractorStage(client, schema={"title": "string|null", "skills": "list[string]|[]"})

        result = await stage.predict(jd_text=SAMPLE_JD)

        assert result.data == {"title": None, "skills": []}
        assert result.usage.total_tokens == 0

    @pytest.mark.asyncio
    async def test_blank_text_skips_network(self, make_client):
        client, endpoint = make_client()
        stage = JDExtractorStage(client)

        result = await stage.predict(jd_text="   ")

        assert endpoint.requests == []
        assert list(result.data) == list(EXTRACTION_SCHEMA)


class TestExtractEntryPoint:
    @pytest.mark.asyncio
    async def test_uses_registered_stage(self, make_client):
        client, endpoint = make_client(httpx.Response(503, text="overloaded"), max_retries=2)
        stage_registry.register("extractor", JDExtractorStage(client))

        result = await extract(SAMPLE_JD)

        assert list(result.data) == list(EXTRACTION_SCHEMA)
        assert len(endpoint.requests) == 2
