"""
JSON array extraction from free-form model text.

Best effort and deliberately dumb: greedy match from the first ``[`` to the
last ``]``, then ``json.loads``. Any failure is an upstream failure; there
is no attempt to repair the payload.
"""

import json
import re
from typing import Any, List

from ..core.errors import UpstreamUnavailableError

ARRAY_PATTERN = re.compile(r"\[.*\]", re.DOTALL)


def extract_recipe_array(text: Any) -> List[Any]:
    if not isinstance(text, str) or not text.strip():
        raise UpstreamUnavailableError("model returned empty text")

    match = ARRAY_PATTERN.search(text.strip())
    if not match:
        raise UpstreamUnavailableError("no JSON array in model text")

    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise UpstreamUnavailableError(f"recipe JSON parse failed: {e}") from e

    if not isinstance(parsed, list):
        raise UpstreamUnavailableError("decoded recipe payload is not an array")
    return parsed
