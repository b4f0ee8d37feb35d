"""Tolerant JSON extraction from raw model output."""

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)


def try_parse_json(text: Any) -> Any | None:
    """Parse the JSON object embedded in ``text``, or return None.

    Slices from the first ``{`` to the last ``}`` so prose or markdown code
    fences around the object are ignored. A literal brace inside that prose
    will throw the slice off; that case is left to the retry loop.
    """
    if not text or not isinstance(text, str):
        return None

    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end <= start:
        return None

    try:
        return json.loads(text[start:end + 1])
    except json.JSONDecodeError as e:
        logger.debug("Failed to parse JSON snippet: %s", e)
        return None
