"""
Request parsing helpers. Callers send identifiers in snake_case or
camelCase, in the JSON body or the query string, sometimes as numbers.
"""

from typing import Any, Mapping, Optional

from fastapi import Request


def clean_str(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list, bool)):
        return None
    text = str(value).strip()
    return text or None


def first_value(*candidates: Any) -> Optional[str]:
    """Return the first candidate that is non-empty after trimming."""
    for c in candidates:
        text = clean_str(c)
        if text:
            return text
    return None


def pick(
    body: Mapping[str, Any], query: Mapping[str, Any], *keys: str
) -> Optional[str]:
    """Try each key in the body first, then each key in the query string."""
    return first_value(
        *(body.get(k) for k in keys),
        *(query.get(k) for k in keys),
    )


async def read_json_body(request: Request) -> dict:
    """The JSON object body, or {} when it's missing or not an object."""
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def parse_limit(raw: Optional[str]) -> Optional[int]:
    """A positive integer cap, or None when absent or unparseable."""
    text = clean_str(raw)
    if text is None:
        return None
    try:
        value = int(text)
    except ValueError:
        return None
    return value if value > 0 else None
