import json
import re
from typing import Any, Dict

from errors import MalformedResponseError

# Models sometimes wrap the JSON in a markdown fence despite being told not to
_FENCED_JSON = re.compile(r"```json\s*([\s\S]*?)\s*```")
_FENCED_ANY = re.compile(r"```\s*([\s\S]*?)\s*```")


def parse_json_payload(raw: str) -> Dict[str, Any]:
    """
    Parse a model reply into a JSON object.

    Tries the raw text first, then a ```json fenced block, then any fenced
    block. Raises MalformedResponseError if none of them is a JSON object.
    """
    candidates = [raw]
    for pattern in (_FENCED_JSON, _FENCED_ANY):
        m = pattern.search(raw)
        if m:
            candidates.append(m.group(1))

    for candidate in candidates:
        try:
            parsed = json.loads(candidate.strip())
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict):
            return parsed

    raise MalformedResponseError("The AI response could not be read. Please try again.")
