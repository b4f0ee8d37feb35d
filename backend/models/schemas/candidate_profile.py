"""Candidate profile: the fixed reference data the comparator classifies against."""

import logging
from pathlib import Path

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class Requirements(BaseModel):
    """Hard constraints. A job violating one of these is not eligible."""
    country: str | None = None
    min_salary_cad: int | float | None = None
    max_salary_cad: int | float | None = None
    min_experience_years: int | float | None = None
    max_experience_years: int | float | None = None
    highest_education: str | None = None
    spoken_languages: list[str] = []
    job_field: list[str] = []
    employment_types_allowed: list[str] = []
    min_employees_in_company: int | None = None


class TechStack(BaseModel):
    comfortable_with: list[str] = []


class CompanyPreferences(BaseModel):
    preferred_size: list[str] = []


class Preferences(BaseModel):
    """Soft preferences. Missing one makes a job yellow, not red."""
    desired_salary_cad: int | float | None = None
    preferred_work_mode: list[str] = []
    preferred_locations: list[str] = []
    experience_range_preferred: list[int | float] = []
    role_priority_order: list[str] = []
    tech_stack: TechStack = TechStack()
    company: CompanyPreferences = CompanyPreferences()
    preferred_seniority_levels: list[str] = []


class CandidateProfile(BaseModel):
    requirements: Requirements = Requirements()
    preferences: Preferences = Preferences()

    model_config = {"frozen": True}


MY_PROFILE = CandidateProfile(
    requirements=Requirements(
        country="Canada",
        min_salary_cad=45000,
        max_salary_cad=90000,
        min_experience_years=0,
        max_experience_years=2,
        highest_education="Bachelors in Computer Engineering",
        spoken_languages=["English"],
        job_field=["software development", "web development"],
        employment_types_allowed=["full-time", "internship"],
        min_employees_in_company=50,
    ),
    preferences=Preferences(
        desired_salary_cad=65000,
        preferred_work_mode=["remote", "hybrid"],
        preferred_locations=["Vancouver"],
        experience_range_preferred=[0, 1],
        role_priority_order=["backend", "frontend", "fullstack", "cloud", "data", "other"],
        tech_stack=TechStack(
            comfortable_with=["python", "sql", "fastapi", "flask", "postgres", "react", "docker"],
        ),
        company=CompanyPreferences(preferred_size=["large"]),
        preferred_seniority_levels=["Entry", "Junior"],
    ),
)


def load_profile(path: str = "") -> CandidateProfile:
    """Read a profile from a JSON file, or return the built-in profile if no path is given."""
    if not path:
        return MY_PROFILE
    profile = CandidateProfile.model_validate_json(Path(path).read_text(encoding="utf-8"))
    logger.info("Candidate profile loaded from %s", path)
    return profile
