import json
import re
from typing import Any


# ============================================================
# JSON REPLY PARSER (LLM TRUST BOUNDARY)
# ============================================================

_FENCE_OPEN = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_FENCE_CLOSE = re.compile(r"\s*```$")

_decoder = json.JSONDecoder()


class ReplyParseError(ValueError):
    """The model reply holds no parseable JSON"""


def strip_fences(text: str) -> str:
    """Remove a surrounding ```json ... ``` markdown fence."""
    text = _FENCE_OPEN.sub("", text.strip())
    return _FENCE_CLOSE.sub("", text.strip())


def load_json_reply(text: str) -> Any:
    """
    Parse JSON out of raw model text.

    Strategy:
    1. Strip markdown fences, try json.loads (fast path)
    2. Fallback to the first complete {...} object embedded in the text

    Raises ReplyParseError instead of inventing an empty result.
    """
    if not isinstance(text, str) or not text.strip():
        raise ReplyParseError("empty model reply")

    cleaned = strip_fences(text)

    try:
        return json.loads(cleaned)
    except json.JSONDecodeError:
        pass

    start = cleaned.find("{")
    if start < 0:
        raise ReplyParseError("no JSON object found in model reply")

    last_error = None
    while start >= 0:
        try:
            value, _ = _decoder.raw_decode(cleaned, start)
            return value
        except json.JSONDecodeError as e:
            last_error = e
        start = cleaned.find("{", start + 1)

    raise ReplyParseError(f"malformed JSON in model reply: {last_error.msg}") from last_error
