"""Shared test configuration, pytest markers and endpoint fixtures."""

import pytest

from fakes import ScriptedEndpoint, SleepRecorder
from services import result_cache
from services.completion_client import CompletionClient, CompletionConfig
from services.pipeline.stage_registry import clear as clear_registry
from services.validators import is_extraction_struct


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "live: calls the real chat-completion endpoint (needs OPENAI_API_KEY)"
    )


@pytest.fixture(autouse=True)
def _reset_state():
    """Clear stage registry and cached results around each test."""
    clear_registry()
    result_cache.clear()
    yield
    clear_registry()
    result_cache.clear()


@pytest.fixture
def sleep_recorder():
    return SleepRecorder()


@pytest.fixture
def make_client(sleep_recorder):
    """Factory: a CompletionClient wired to a ScriptedEndpoint."""

    def _make(*replies, validator=is_extraction_struct, fallback=None, sample_result=None, **config):
        endpoint = ScriptedEndpoint(*replies) if replies else ScriptedEndpoint(AssertionError("no replies"))
        cfg = CompletionConfig(**{"model": "test-model", "api_key": "sk-test", **config})
        client = CompletionClient(
            cfg,
            validator,
            fallback=fallback,
            sample_result=sample_result,
            transport=endpoint.transport(),
            sleep=sleep_recorder,
        )
        return client, endpoint

    return _make
