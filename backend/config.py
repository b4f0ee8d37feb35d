import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False

    # Two-stage LLM pipeline settings
    extraction_model: str = "gpt-4.1-mini"
    compare_model: str = "gpt-5-mini"
    extraction_max_retries: int = 2
    compare_max_retries: int = 1
    retry_delay_seconds: float = 0.5
    request_timeout_seconds: float = 120.0

    # Offline development: skip the network and return canned results
    use_sample_data: bool = False
    sample_delay_seconds: float = 0.5

    candidate_profile_path: str = ""  # JSON file overriding the built-in profile
    max_jd_chars: int = 20000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "protected_namespaces": ("settings_",)}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
