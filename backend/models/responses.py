from typing import Any

from pydantic import BaseModel


class UsageRecord(BaseModel):
    """Token accounting as reported by the endpoint. Extra keys are kept verbatim."""
    total_tokens: int = 0

    model_config = {"extra": "allow"}


class CompletionResult(BaseModel):
    data: dict[str, Any] = {}
    usage: UsageRecord = UsageRecord()


class AnalysisResult(BaseModel):
    extracted: dict[str, Any] = {}
    comparison: dict[str, Any] = {}
    usage: UsageRecord = UsageRecord()


class SchemaField(BaseModel):
    name: str
    hint: str


class SchemaResponse(BaseModel):
    fields: list[SchemaField] = []
    json_schema: dict[str, Any] = {}
