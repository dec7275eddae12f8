"""
Spy Cat Agency console.
Error normalization - turns backend error payloads into one display sentence.
"""

import json
import re
from typing import Any

UNKNOWN_ERROR = "Unknown error"
INVALID_BREED_MESSAGE = "Invalid breed. Please use a valid breed name."

_BODY_PREFIX = re.compile(r'^body\.', re.IGNORECASE)
_ENUM = re.compile(r'enum', re.IGNORECASE)
# Captured breed name starts with a visible, non-punctuation character.
_INVALID_BREED = re.compile(r'invalid breed[:\s]*\'?([^\'"\s.,;][^\'"]*)\'?', re.IGNORECASE)
_NORMALIZED_BREED = re.compile(r'^Invalid breed(?:: .+)?\. Please use a valid breed name\.$')
_VALUE_ERROR = re.compile(r'value error[:,]?\s*', re.IGNORECASE)
_BREED_LABEL = re.compile(r'^breed[:\s-]*', re.IGNORECASE)
_WHITESPACE = re.compile(r'\s+')


def _clean(msg: str) -> str:
    """One cleanup pass over a stripped message."""
    if _NORMALIZED_BREED.match(msg):
        return msg

    msg = _BODY_PREFIX.sub('', msg, count=1)
    msg = msg.replace('_', ' ')

    if _ENUM.search(msg):
        return INVALID_BREED_MESSAGE

    match = _INVALID_BREED.search(msg)
    if match:
        return f"Invalid breed: {match.group(1).strip()}. Please use a valid breed name."

    msg = _VALUE_ERROR.sub('', msg, count=1)
    msg = _BREED_LABEL.sub('Invalid breed. ', msg, count=1)
    msg = _WHITESPACE.sub(' ', msg).strip()

    return msg[:1].upper() + msg[1:]


def prettify(text: Any) -> str:
    """
    Clean up a single backend message for display.

    Strips the ``body.`` location prefix and underscores, maps breed
    validation failures onto fixed wording, drops pydantic's
    "Value error" marker and capitalizes the result. Cleanup repeats until
    the text stops changing, so the result is its own prettified form.
    """
    msg = str(text).strip()
    while True:
        cleaned = _clean(msg)
        if cleaned == msg:
            return cleaned
        msg = cleaned


def _is_set(value: Any) -> bool:
    """Truthiness the way a JSON consumer sees it: empty containers still count."""
    if value is None or value is False:
        return False
    if isinstance(value, (str, int, float)):
        return bool(value)
    return True


def _format_detail_entry(entry: Any) -> str:
    if isinstance(entry, str):
        return prettify(entry)
    if not isinstance(entry, dict):
        return ''

    loc = entry.get('loc')
    location = '.'.join(part for part in loc if isinstance(part, str)) if isinstance(loc, list) else ''

    raw = entry.get('msg') or entry.get('message') or ''
    combined = f"{location}: {raw}" if location else str(raw)
    return prettify(combined)


def get_api_error_message(data: Any) -> str:
    """
    Convert a backend error payload into one human-readable string.

    Handles plain strings, FastAPI-style ``{"detail": ...}`` bodies (string,
    list of ``{loc, msg}`` entries, or ``{message}``), bare ``{"message"}``
    bodies, and falls back to the serialized payload.
    """
    if not _is_set(data):
        return UNKNOWN_ERROR
    if isinstance(data, str):
        return prettify(data)

    if isinstance(data, dict):
        detail = data.get('detail')
        if _is_set(detail):
            if isinstance(detail, str):
                return prettify(detail)
            if isinstance(detail, list):
                messages = [_format_detail_entry(entry) for entry in detail]
                return '; '.join(m for m in messages if m)
            if isinstance(detail, dict) and _is_set(detail.get('message')):
                return prettify(detail['message'])

        if _is_set(data.get('message')):
            return prettify(data['message'])

    try:
        return prettify(json.dumps(data, separators=(',', ':'), ensure_ascii=False))
    except (TypeError, ValueError):
        return UNKNOWN_ERROR
