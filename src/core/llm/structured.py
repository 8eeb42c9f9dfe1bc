"""Best-effort JSON extraction from free-text model output.

Models wrap JSON in prose or markdown fences and sometimes return none at
all. Every caller that needs structured output goes through
``parse_or_default`` and gets either validated data or its own default.
"""

import json
import logging
import re
from typing import Any, Literal, TypeVar

from pydantic import TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")
JsonKind = Literal["array", "object"]

_GREEDY = {
    "array": re.compile(r"\[[\s\S]*\]"),
    "object": re.compile(r"\{[\s\S]*\}"),
}
_OPENER = {"array": "[", "object": "{"}
_decoder = json.JSONDecoder()


def extract_json(text: str | None, kind: JsonKind = "object") -> Any | None:
    """Return the first well-formed JSON array/object in ``text``, or None.

    Tries the outermost bracket span first, then scans each opening bracket
    until one decodes.
    """
    if not text:
        return None

    match = _GREEDY[kind].search(text)
    if match:
        try:
            return json.loads(match.group(0))
        except json.JSONDecodeError:
            pass

    opener = _OPENER[kind]
    start = text.find(opener)
    while start != -1:
        try:
            value, _ = _decoder.raw_decode(text, start)
            return value
        except json.JSONDecodeError:
            start = text.find(opener, start + 1)
    return None


def parse_or_default(text: str | None, kind: JsonKind, schema: Any, default: T) -> T:
    """Parse ``text`` into ``schema`` or return ``default``. Never raises on bad output."""
    data = extract_json(text, kind)
    if data is None:
        logger.warning("No JSON %s in model output, using default", kind)
        return default
    try:
        return TypeAdapter(schema).validate_python(data)
    except ValidationError as e:
        logger.warning("Model output failed validation, using default: %s", e)
        return default
