"""
Lenient parsing of LLM list output.
"""
import json
import re
from typing import List, Optional

CODE_FENCE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)


def parse_string_list(text: str) -> Optional[List[str]]:
    """
    Extract a JSON array of strings from model output.

    Accepts a bare array, an array inside a ```json fence, or an array
    embedded in surrounding prose. Returns None when nothing parses.
    """
    if not text or not text.strip():
        return None

    candidates = [text.strip()]
    fenced = CODE_FENCE.search(text)
    if fenced:
        candidates.append(fenced.group(1).strip())
    start, end = text.find("["), text.rfind("]")
    if 0 <= start < end:
        candidates.append(text[start:end + 1])

    for candidate in candidates:
        try:
            value = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(value, list):
            items = [str(item).strip() for item in value if isinstance(item, (str, int, float))]
            return [item for item in items if item]

    return None
