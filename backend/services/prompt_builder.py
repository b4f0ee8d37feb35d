"""All prompt templates for the extraction and comparison calls."""

import json
from typing import Any, Mapping

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.field_schema import EXTRACTION_SCHEMA, FieldKind, coerce_schema, empty_record

EXTRACTION_SYSTEM = (
    "You are a careful JSON extractor. Read the job description and return EXACTLY one JSON object "
    "that follows the provided schema and template. Return ONLY valid JSON (no commentary). "
    "If a numeric field cannot be reliably inferred, use null. If a list field is missing, return []. "
    "Be conservative: prefer null/empty to inventing facts."
)

EXTRACTION_INSTRUCTIONS_HEADER = (
    "Extract the following fields from the job description and return them as a JSON object EXACTLY "
    "following the schema below. If a field is missing, set it to null (scalar) or [] (list)."
)

COMPARE_SYSTEM = (
    "You are a strict JSON classifier. Input: (1) a job posting extraction JSON (fields parsed from the JD), "
    "and (2) the candidate's profile JSON. Task: Compare the job description fields to the candidate's "
    "profile and classify each relevant field into one of four buckets: \"red\" (Not eligible), "
    "\"yellow\" (Eligible but away from preferred), \"grey\" (Informational / unknown), "
    "or \"green\" (Eligible and preferred). RETURN EXACTLY ONE JSON OBJECT following the provided output schema. "
    "Do NOT invent numeric values or dates. If a field value is missing in the JD, set evidence to null. "
    "For each field entry include: field name, color, an explanation string that cites the JD value and the relevant "
    "profile constraint (e.g., \"salary offered (40000) < salary_min (50000)\"), and an evidence field (the raw value). "
    "Do NOT output any text outside the JSON."
)

COMPARE_OUTPUT_TEMPLATE = {
    "overall_eligibility": "red|yellow|grey|green",
    "summary_explanation": "string",
    "fields": {
        "<field_name>": {
            "color": "red|yellow|grey|green",
            "explanation": "string (must cite evidence and comparison)",
            "evidence": None,
        }
    },
}

COMPARE_EXAMPLE = {
    "overall_eligibility": "yellow",
    "summary_explanation": "Location OK, experience OK, tech slightly off; salary not listed.",
    "fields": {
        "location": {
            "color": "green",
            "explanation": "Location 'Vancouver' matches required country Canada.",
            "evidence": "Vancouver",
        },
        "salary_min_cad": {
            "color": "grey",
            "explanation": "Salary not provided in JD; unable to compare.",
            "evidence": None,
        },
    },
}


def _pretty(obj: Any) -> str:
    return json.dumps(obj, indent=2, ensure_ascii=False)


def schema_fields_text(schema: Mapping[str, FieldKind | str]) -> str:
    """One ``- name: hint`` line per field, in schema order."""
    return "\n".join(f"- {name}: {kind.hint}" for name, kind in coerce_schema(schema).items())


def build_extraction_prompt(
    jd_text: str,
    schema: Mapping[str, FieldKind | str] = EXTRACTION_SCHEMA,
) -> str:
    """Render the extraction instruction for one job description."""
    text = jd_text.strip()
    if not text:
        raise ValueError("Job description is empty")

    return f"""{EXTRACTION_INSTRUCTIONS_HEADER}

Schema fields (name: type/hint):

{schema_fields_text(schema)}

Please return a single JSON object following this template EXACTLY:

{_pretty(empty_record(schema))}

Job description:
--------
{text}
--------

Return ONLY the JSON object."""


def build_compare_prompt(
    extracted: Mapping[str, Any],
    profile: CandidateProfile | Mapping[str, Any],
) -> str:
    """Render the comparison instruction for one extraction result and profile."""
    if isinstance(profile, CandidateProfile):
        profile = profile.model_dump()

    return f"""EXTRACTED_JD_JSON:
{_pretty(dict(extracted))}

IDEAL_PROFILE_JSON:
{_pretty(dict(profile))}

IMPORTANT: Return ONLY a single JSON object that EXACTLY follows this OUTPUT TEMPLATE below. Do NOT output any additional text.

OUTPUT TEMPLATE (return EXACTLY this structure - use the 'fields' object to list only the fields you compare):
{_pretty(COMPARE_OUTPUT_TEMPLATE)}

EXAMPLE (valid output):
{_pretty(COMPARE_EXAMPLE)}

Now produce the JSON result comparing the EXTRACTED_JD_JSON to the IDEAL_PROFILE_JSON above. For each field you include, make the explanation concise and cite the evidence value exactly as it appears in EXTRACTED_JD_JSON (or null if missing)."""


def build_json_schema(schema: Mapping[str, FieldKind | str] = EXTRACTION_SCHEMA) -> dict:
    """Convert the field schema into a basic JSON Schema document."""
    props: dict[str, dict] = {}
    for name, kind in coerce_schema(schema).items():
        if kind is FieldKind.NUMBER:
            props[name] = {"type": ["number", "null"]}
        elif kind.is_list:
            props[name] = {"type": "array", "items": {"type": "string"}}
        else:
            props[name] = {"type": ["string", "null"]}
    return {"type": "object", "properties": props, "additionalProperties": True}
