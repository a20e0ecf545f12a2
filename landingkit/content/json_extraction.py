# landingkit/content/json_extraction.py

"""Locate and decode the JSON object inside a language model reply."""

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any

from landingkit.errors import ParseError

logger = logging.getLogger("landingkit.content")

_FENCE_RE = re.compile(r"```[ \t]*[A-Za-z0-9_-]*[ \t]*\n?(.*?)```", re.DOTALL)

# Bound on how many '{' positions are tried before giving up
_MAX_SPAN_ATTEMPTS = 20


@dataclass(frozen=True)
class ModelReply:
    """A reply split into its JSON object (if any) and surrounding prose."""

    raw: str
    data: dict[str, Any] | None = None
    prose: str = ""
    errors: list[str] = field(default_factory=lambda: list[str]())

    @property
    def has_json(self) -> bool:
        return self.data is not None


def strip_code_fences(text: str) -> str:
    """Return the body of the first fenced block holding a ``{``.

    Text without fences (or whose fences hold no object) is returned
    unchanged.
    """
    for match in _FENCE_RE.finditer(text):
        body = match.group(1)
        if "{" in body:
            return body.strip()
    return text


def balanced_span(text: str, start: int) -> tuple[int, int]:
    """End-exclusive span of the ``{...}`` block opening at *start*.

    Braces inside JSON string literals are ignored. Raises
    :class:`ParseError` when the block never closes.
    """
    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        ch = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return start, index + 1
    raise ParseError(f"unbalanced braces from offset {start}")


def decode_object(text: str) -> dict[str, Any]:
    """``json.loads`` that insists on an object."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"invalid JSON: {exc.msg} at {exc.pos}") from exc
    except RecursionError as exc:
        raise ParseError("JSON nested too deeply") from exc
    if not isinstance(data, dict):
        raise ParseError(f"expected a JSON object, got {type(data).__name__}")
    return data


def find_json_object(text: str) -> tuple[dict[str, Any], tuple[int, int]]:
    """Decode the first outermost ``{...}`` block that is valid JSON.

    Returns the object and its span within *text*. Raises
    :class:`ParseError` when no block decodes.
    """
    stripped = text.strip()
    if stripped.startswith("{"):
        try:
            offset = text.index(stripped[0])
            return decode_object(stripped), (offset, offset + len(stripped))
        except ParseError:
            pass

    position = text.find("{")
    attempts = 0
    last_error = "no '{' found"
    while position != -1 and attempts < _MAX_SPAN_ATTEMPTS:
        attempts += 1
        try:
            start, end = balanced_span(text, position)
            return decode_object(text[start:end]), (start, end)
        except ParseError as exc:
            last_error = str(exc)
        position = text.find("{", position + 1)
    raise ParseError(last_error)


def split_reply(raw: str | None) -> ModelReply:
    """Split a raw reply into its JSON object and the prose around it.

    Never raises: a reply without a decodable object comes back with
    ``data=None``, the full text as prose and the parse error noted.
    """
    text = (raw or "").strip()
    if not text:
        return ModelReply(raw="", prose="", errors=["empty reply"])

    fenced = strip_code_fences(text)
    try:
        data, (start, end) = find_json_object(fenced)
    except ParseError as exc:
        logger.info("Model reply holds no JSON object: %s", exc)
        return ModelReply(raw=text, prose=text, errors=[str(exc)])

    if fenced is text:
        prose = (text[:start] + "\n" + text[end:]).strip()
    else:
        prose = _FENCE_RE.sub("\n", text).strip()
    return ModelReply(raw=text, data=data, prose=prose)
