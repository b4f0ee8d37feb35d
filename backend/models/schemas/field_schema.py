"""Extraction field schema: the single source of truth for what the extractor asks for.

Each field carries an explicit kind. The kind decides the hint text shown to
the model, the default used in the prompt template, and the value written
into the fallback record when every extraction attempt fails.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class FieldKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    STRING_LIST = "list[string]"

    @property
    def is_list(self) -> bool:
        return self is FieldKind.STRING_LIST

    @property
    def hint(self) -> str:
        """Type hint as written into the extraction prompt."""
        if self.is_list:
            return f"{self.value} | []"
        return f"{self.value} | null"

    @property
    def default(self) -> Any:
        return [] if self.is_list else None

    @classmethod
    def from_hint(cls, hint: str) -> "FieldKind":
        """Parse a textual hint such as ``"string|null"`` or ``"list[string] | []"``."""
        normalized = "".join(hint.split()).lower()
        for kind in cls:
            if normalized == "".join(kind.hint.split()):
                return kind
        raise ValueError(f"Unknown field type hint: {hint!r}")


FieldSchema = Mapping[str, FieldKind]


def coerce_schema(schema: Mapping[str, FieldKind | str]) -> dict[str, FieldKind]:
    """Accept kinds or textual hints and return an ordered name -> kind dict."""
    return {
        name: kind if isinstance(kind, FieldKind) else FieldKind.from_hint(kind)
        for name, kind in schema.items()
    }


def empty_record(schema: Mapping[str, FieldKind | str]) -> dict[str, Any]:
    """Every schema key, defaulted: None for scalars, [] for lists."""
    return {name: kind.default for name, kind in coerce_schema(schema).items()}


EXTRACTION_SCHEMA: FieldSchema = MappingProxyType({
    "title": FieldKind.STRING,
    "company_name": FieldKind.STRING,
    "location": FieldKind.STRING,
    "country_hint": FieldKind.STRING,
    "remote": FieldKind.STRING,
    "employment_type": FieldKind.STRING,
    "salary_text": FieldKind.STRING,
    "salary_min_cad": FieldKind.NUMBER,
    "salary_max_cad": FieldKind.NUMBER,
    "experience_required_text": FieldKind.STRING,
    "experience_years_min": FieldKind.NUMBER,
    "experience_years_max": FieldKind.NUMBER,
    "spoken_languages": FieldKind.STRING_LIST,
    "programming_languages": FieldKind.STRING_LIST,
    "required_skills": FieldKind.STRING_LIST,
    "preferred_skills": FieldKind.STRING_LIST,
    "responsibilities": FieldKind.STRING_LIST,
    "qualifications": FieldKind.STRING_LIST,
    "min_education": FieldKind.STRING,
    "seniority_level": FieldKind.STRING,
    "company_size": FieldKind.STRING,
    "posting_date": FieldKind.STRING,
    "closing_date": FieldKind.STRING,
    "application_instructions": FieldKind.STRING,
    "job_field": FieldKind.STRING,
})
