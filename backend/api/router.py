from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_comparator, get_extractor
from config import settings
from models.requests import CompareRequest, JobDescriptionRequest
from models.responses import AnalysisResult, CompletionResult, SchemaField, SchemaResponse
from models.schemas.candidate_profile import CandidateProfile
from services import prompt_builder, result_cache
from services.pipeline import orchestrator
from services.pipeline.comparator import ComparatorStage
from services.pipeline.extractor import JDExtractorStage

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _check_job_description(job_description: str) -> str:
    if not job_description.strip():
        raise HTTPException(status_code=400, detail="Job description is empty")
    if len(job_description) > settings.max_jd_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_jd_chars} chars)",
        )
    return job_description


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "openai_configured": bool(settings.openai_api_key),
        "sample_mode": settings.use_sample_data,
    }


@router.get("/schema", response_model=SchemaResponse)
async def schema(extractor: JDExtractorStage = Depends(get_extractor)):
    return SchemaResponse(
        fields=[SchemaField(name=name, hint=kind.hint) for name, kind in extractor.schema.items()],
        json_schema=prompt_builder.build_json_schema(extractor.schema),
    )


@router.get("/profile", response_model=CandidateProfile)
async def profile(comparator: ComparatorStage = Depends(get_comparator)):
    return comparator.profile


@router.post("/extract", response_model=CompletionResult)
@limiter.limit("10/minute")
async def extract(
    request: Request,
    body: JobDescriptionRequest,
    extractor: JDExtractorStage = Depends(get_extractor),
):
    jd_text = _check_job_description(body.job_description)
    return await extractor.predict(jd_text=jd_text)


@router.post("/compare", response_model=CompletionResult)
@limiter.limit("10/minute")
async def compare(
    request: Request,
    body: CompareRequest,
    comparator: ComparatorStage = Depends(get_comparator),
):
    return await comparator.predict(extracted=body.extracted, profile=body.profile)


@router.post("/analyze", response_model=AnalysisResult)
@limiter.limit("10/minute")
async def analyze(request: Request, body: JobDescriptionRequest):
    jd_text = _check_job_description(body.job_description)
    result = await orchestrator.analyze(jd_text)
    result_cache.store_latest(result)
    return result


@router.get("/results/latest", response_model=AnalysisResult)
async def latest_result():
    result = result_cache.get_latest()
    if result is None:
        raise HTTPException(status_code=404, detail="No analysis has been run yet")
    return result
