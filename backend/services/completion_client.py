"""Chat-completion client with bounded retry and a per-client exhaustion policy.

Each attempt is classified into a tagged outcome so the retry loop and the
logs can tell transport, parse and validation failures apart. All three are
retried the same way.
"""

import asyncio
import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Literal

import httpx
from pydantic import BaseModel, ValidationError

from models.responses import CompletionResult, UsageRecord
from services.json_parser import try_parse_json

logger = logging.getLogger(__name__)

_LOG_SNIPPET_CHARS = 300


class CompletionConfig(BaseModel):
    """Explicit per-client settings, built once from the process configuration."""
    model: str
    api_key: str = ""
    base_url: str = "https://api.openai.com/v1"
    max_retries: int = 1
    retry_delay_seconds: float = 0.5
    on_exhausted: Literal["raise", "fallback"] = "raise"
    use_sample_data: bool = False
    sample_delay_seconds: float = 0.5
    timeout_seconds: float | None = 120.0

    model_config = {"frozen": True}


@dataclass(frozen=True)
class AttemptOk:
    data: dict[str, Any]
    usage: UsageRecord = field(default_factory=UsageRecord)


@dataclass(frozen=True)
class TransportFailure:
    status: int | None = None
    body: str = ""
    error: str = ""

    def describe(self) -> str:
        if self.status is not None:
            return f"transport: HTTP {self.status}: {self.body[:_LOG_SNIPPET_CHARS]}"
        return f"transport: {self.error}"


@dataclass(frozen=True)
class ParseFailure:
    content: str | None = None
    envelope: bool = False  # response body was not a chat-completion envelope

    def describe(self) -> str:
        snippet = str(self.content)[:_LOG_SNIPPET_CHARS]
        if self.envelope:
            return f"parse: malformed response envelope {snippet!r}"
        return f"parse: no JSON object in {snippet!r}"


@dataclass(frozen=True)
class ValidationFailure:
    parsed: Any = None

    def describe(self) -> str:
        keys = sorted(self.parsed) if isinstance(self.parsed, dict) else type(self.parsed).__name__
        return f"validation: unexpected structure ({keys})"


AttemptFailure = TransportFailure | ParseFailure | ValidationFailure
AttemptOutcome = AttemptOk | AttemptFailure


class CompletionExhaustedError(Exception):
    """Every attempt failed and the client is configured to raise."""

    def __init__(self, model: str, failures: list[AttemptFailure]) -> None:
        self.model = model
        self.failures = failures
        last = failures[-1].describe() if failures else "no attempts made"
        super().__init__(f"{model}: all {len(failures)} attempt(s) failed (last {last})")


class CompletionClient:
    def __init__(
        self,
        config: CompletionConfig,
        validator: Callable[[Any], bool],
        *,
        fallback: dict[str, Any] | None = None,
        sample_result: dict[str, Any] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        if config.on_exhausted == "fallback" and fallback is None:
            raise ValueError("on_exhausted='fallback' requires a fallback object")
        if not config.api_key and not config.use_sample_data:
            logger.warning("No OPENAI_API_KEY set - requests to %s will be rejected", config.model)
        self.config = config
        self._validator = validator
        self._fallback = fallback
        self._sample_result = sample_result
        self._transport = transport
        self._sleep = sleep

    @property
    def endpoint(self) -> str:
        return f"{self.config.base_url.rstrip('/')}/chat/completions"

    async def complete(self, system: str, user: str) -> CompletionResult:
        """Run the attempt loop for one system/user instruction pair."""
        if self.config.use_sample_data:
            logger.info("Using sample data instead of calling %s", self.config.model)
            await self._sleep(self.config.sample_delay_seconds)
            return CompletionResult(data=copy.deepcopy(self._sample_result or {}), usage=UsageRecord())

        messages = [
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ]
        attempts = max(1, self.config.max_retries)
        failures: list[AttemptFailure] = []

        async with httpx.AsyncClient(timeout=self.config.timeout_seconds, transport=self._transport) as http:
            for attempt in range(1, attempts + 1):
                logger.info("Calling %s (attempt %d/%d)", self.config.model, attempt, attempts)
                outcome = await self._attempt(http, messages)

                if isinstance(outcome, AttemptOk):
                    logger.info("Accepted structured response from %s", self.config.model)
                    return CompletionResult(data=outcome.data, usage=outcome.usage)

                failures.append(outcome)
                logger.warning(
                    "%s attempt %d/%d failed - %s", self.config.model, attempt, attempts, outcome.describe()
                )
                if attempt < attempts:
                    await self._sleep(self.config.retry_delay_seconds)

        return self._exhausted(failures)

    async def _attempt(self, http: httpx.AsyncClient, messages: list[dict[str, str]]) -> AttemptOutcome:
        try:
            response = await http.post(
                self.endpoint,
                headers={"Authorization": f"Bearer {self.config.api_key}"},
                json={
                    "model": self.config.model,
                    "messages": messages,
                    "response_format": {"type": "json_object"},
                },
            )
        except httpx.HTTPError as e:
            return TransportFailure(error=f"{type(e).__name__}: {e}")

        if not response.is_success:
            return TransportFailure(status=response.status_code, body=response.text)

        try:
            payload = response.json()
            content = payload["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError):
            return ParseFailure(content=response.text, envelope=True)

        parsed = try_parse_json(content)
        if parsed is None:
            return ParseFailure(content=content)
        if not self._validator(parsed):
            return ValidationFailure(parsed=parsed)

        return AttemptOk(data=parsed, usage=_usage_record(payload.get("usage")))

    def _exhausted(self, failures: list[AttemptFailure]) -> CompletionResult:
        logger.error("All %d attempt(s) to %s failed", len(failures), self.config.model)
        if self.config.on_exhausted == "fallback":
            return CompletionResult(data=copy.deepcopy(self._fallback), usage=UsageRecord())
        raise CompletionExhaustedError(self.config.model, failures)


def _usage_record(usage: Any) -> UsageRecord:
    """Endpoint usage kept verbatim; an unusable total_tokens becomes 0."""
    if not isinstance(usage, dict):
        return UsageRecord()
    try:
        return UsageRecord.model_validate(usage)
    except ValidationError:
        logger.warning("Ignoring unusable total_tokens in usage: %r", usage.get("total_tokens"))
        return UsageRecord(**{k: v for k, v in usage.items() if k != "total_tokens"})
