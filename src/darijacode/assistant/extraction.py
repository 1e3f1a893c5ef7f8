import json
import re
from typing import Any

from .errors import DecodeFailure

# A tag word is only skipped when it sits alone on the opening fence line.
ANY_FENCE = re.compile(r"```(?:[\w+#.-]*[ \t]*\n)?([\s\S]*?)```")


def _tagged_fence(language: str) -> re.Pattern:
    return re.compile(r"```" + re.escape(language) + r"\b([\s\S]*?)```", re.IGNORECASE)


def extract_candidate(text: str, language: str = "json") -> str:
    """
    Isolates the most likely structured payload in a model answer.

    Strategies, first non-empty match wins:
    1. a fence tagged with `language` (```json, ```mermaid ...)
    2. any fenced block
    3. the whole text
    """
    text = text or ""
    for pattern in (_tagged_fence(language), ANY_FENCE):
        for match in pattern.finditer(text):
            body = match.group(1).strip()
            if body:
                return body
    return text.strip()


def decode_payload(text: str, language: str = "json") -> Any:
    """Extracts then parses the JSON payload. Raises DecodeFailure on malformed text."""
    candidate = extract_candidate(text, language)
    try:
        return json.loads(candidate)
    except ValueError as e:
        raise DecodeFailure(candidate, str(e)) from e
