# landingkit/content/strategies.py

"""Field accessors tried in order until one yields a usable value.

A field of the landing page is resolved by an ordered chain of
:class:`Strategy` objects: JSON paths first, then heuristics over the
prose around the JSON, then a constant. Coercers decide whether a
value is usable; an unusable value passes the turn to the next
strategy.
"""

import logging
import math
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from landingkit.content.json_extraction import ModelReply

logger = logging.getLogger("landingkit.content")

LABEL_KEYWORDS: dict[str, tuple[str, ...]] = {
    "headline": ("headline",),
    "subheadline": ("subheadline", "sub-headline", "subtitle", "tagline"),
    "description": ("description",),
    "cta": ("call to action", "call-to-action", "cta"),
    "urgency": ("urgency", "scarcity"),
}

_BULLET_RE = re.compile(r"^\s*(?:[-*•]|\d+[.)])\s+(.+?)\s*$")
_STRIP_CHARS = " \t*_`\"'“”:#-"


def _label_pattern(keyword: str) -> re.Pattern[str]:
    # Optional list marker, markdown emphasis and section prefix before
    # the keyword; the rest of the line is the value
    return re.compile(
        r"^[\s#*_>\-•\d.)]*(?:hero\s+|product\s+)?"
        + re.escape(keyword)
        + r"\b[*_]*[:\s]*([^\n]+)",
        re.IGNORECASE | re.MULTILINE,
    )


_LABEL_PATTERNS: dict[str, tuple[re.Pattern[str], ...]] = {
    field: tuple(_label_pattern(kw) for kw in keywords)
    for field, keywords in LABEL_KEYWORDS.items()
}


def clean_fragment(text: str) -> str:
    """Trim markdown emphasis, quotes and label punctuation."""
    return text.strip().strip(_STRIP_CHARS).strip()


def _is_label_line(line: str) -> bool:
    return any(
        p.match(line) for patterns in _LABEL_PATTERNS.values() for p in patterns
    )


@dataclass(frozen=True)
class ReplyView:
    """A :class:`ModelReply` with the prose pre-split for heuristics."""

    reply: ModelReply
    lines: tuple[str, ...]
    labelled: bool

    @classmethod
    def of(cls, reply: ModelReply) -> "ReplyView":
        lines = tuple(
            cleaned
            for line in reply.prose.splitlines()
            if not line.strip().startswith("```")
            and (cleaned := clean_fragment(line))
        )
        return cls(
            reply=reply,
            lines=lines,
            labelled=any(
                _is_label_line(line) for line in reply.prose.splitlines()
            ),
        )

    @property
    def positional(self) -> bool:
        """Line position is trusted only for plain, unlabelled prose."""
        return not self.reply.has_json and not self.labelled


@dataclass(frozen=True)
class Strategy:
    name: str
    accessor: Callable[[ReplyView], Any]

    def __call__(self, view: ReplyView) -> Any:
        return self.accessor(view)


# --- accessors ---

def json_path(*path: str) -> Strategy:
    """Value at a dotted key path inside the decoded JSON object."""

    def access(view: ReplyView) -> Any:
        node: Any = view.reply.data
        for key in path:
            if not isinstance(node, dict):
                return None
            node = node.get(key)
        return node

    return Strategy("json:" + ".".join(path), access)


def labelled(field: str) -> Strategy:
    """Rest of the first prose line introduced by one of *field*'s labels."""
    patterns = _LABEL_PATTERNS[field]

    def access(view: ReplyView) -> Any:
        for pattern in patterns:
            match = pattern.search(view.reply.prose)
            if match:
                value = clean_fragment(match.group(1))
                if value:
                    return value
        return None

    return Strategy(f"label:{field}", access)


def line_at(index: int) -> Strategy:
    def access(view: ReplyView) -> Any:
        if view.positional and index < len(view.lines):
            return view.lines[index]
        return None

    return Strategy(f"line:{index}", access)


def line_span(start: int, stop: int) -> Strategy:
    """Lines ``start..stop-1`` joined by single spaces."""

    def access(view: ReplyView) -> Any:
        if not view.positional:
            return None
        return " ".join(view.lines[start:stop]) or None

    return Strategy(f"lines:{start}-{stop}", access)


def bullets() -> Strategy:
    """Bulleted or numbered prose lines that are not field labels."""

    def access(view: ReplyView) -> Any:
        items: list[str] = []
        for line in view.reply.prose.splitlines():
            match = _BULLET_RE.match(line)
            if not match or _is_label_line(line):
                continue
            item = clean_fragment(match.group(1))
            if item:
                items.append(item)
        return items or None

    return Strategy("bullets", access)


def constant(value: Any, name: str = "default") -> Strategy:
    return Strategy(name, lambda view: value)


# --- coercers ---

def as_text(value: Any) -> str | None:
    """Stripped non-empty string; other scalar types are not text."""
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def as_text_list(value: Any) -> list[str] | None:
    """Non-empty list of strings; a string is split on newlines/commas."""
    if isinstance(value, str):
        separator = "\n" if "\n" in value else ","
        value = [clean_fragment(part) for part in value.split(separator)]
    if not isinstance(value, (list, tuple)):
        return None
    items = [t for v in value if (t := as_text(v)) is not None]
    return items or None


def as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        digits = re.sub(r"[,\s+]", "", value)
        if digits.isdigit():
            return int(digits)
    return None


def as_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if isinstance(value, (int, float)) and math.isfinite(value):
        return float(value)
    return None


def as_bool(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


def as_text_mapping(value: Any) -> dict[str, str] | None:
    if not isinstance(value, dict) or not value:
        return None
    mapping = {
        str(k): text for k, v in value.items() if (text := as_text(v))
    }
    return mapping or None


def as_records(value: Any) -> list[Any] | None:
    """Non-empty list, kept as-is for per-item coercion."""
    if isinstance(value, list) and value:
        return value
    return None


def resolve(
    chain: Sequence[Strategy],
    view: ReplyView,
    coerce: Callable[[Any], Any],
) -> tuple[Any, str]:
    """Run *chain* and return the first usable value and its strategy name.

    Returns ``(None, "")`` when every strategy comes up empty.
    """
    for strategy in chain:
        try:
            value = coerce(strategy(view))
        except (TypeError, ValueError, OverflowError) as exc:
            logger.debug("Strategy %s rejected: %s", strategy.name, exc)
            continue
        if value is not None:
            return value, strategy.name
    return None, ""
