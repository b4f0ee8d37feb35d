from typing import Any

from pydantic import BaseModel, Field

from models.schemas.candidate_profile import CandidateProfile


class JobDescriptionRequest(BaseModel):
    job_description: str = Field(..., description="Raw job posting text")


class CompareRequest(BaseModel):
    extracted: dict[str, Any] = Field(..., description="Extraction result to classify")
    profile: CandidateProfile | None = Field(None, description="Overrides the configured profile")
