"""Abstract base class for the LLM-backed pipeline stages."""

from abc import ABC, abstractmethod
from typing import Any

from models.responses import CompletionResult
from services.completion_client import CompletionClient


class BasePipelineStage(ABC):
    """Base class for pipeline stages.

    Subclasses must implement:
        - stage_name: identifier used in stage_registry
        - predict(**kwargs): build the prompt, call the model, return a CompletionResult
    """

    stage_name: str = ""

    def __init__(self, client: CompletionClient) -> None:
        self.client = client

    @abstractmethod
    async def predict(self, **kwargs: Any) -> CompletionResult:
        """Run one stage invocation. Never raises for model-side failures."""

    @property
    def model(self) -> str:
        return self.client.config.model
