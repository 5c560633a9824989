"""Helpers for reading JSON out of free-text model responses"""
import json
import re
from typing import Any

_OPENING_FENCE = re.compile(r"^```(?:json)?[ \t]*\n?", re.IGNORECASE)
_CLOSING_FENCE = re.compile(r"\n?```$")


class ResponseParseError(ValueError):
    """Model text could not be parsed as JSON"""


def strip_code_fences(text: str) -> str:
    """
    Remove Markdown code fences wrapping a model response.

    Handles both ```json ... ``` and bare ``` ... ```; unfenced text is
    returned trimmed.
    """
    cleaned = text.strip()
    if not cleaned.startswith("```"):
        return cleaned
    cleaned = _OPENING_FENCE.sub("", cleaned, count=1)
    cleaned = _CLOSING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def parse_json_response(text: str) -> Any:
    """Strip fences and parse the remaining text as JSON"""
    cleaned = strip_code_fences(text)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Model response is not valid JSON: {e.msg} at position {e.pos}") from e
