"""Wire format for highlight spans and parse results.

Spans are sent to the rendering layer as a JSON array of records:

    [{"kind": "At", "start": 0, "end": 1, "text": "@"}, ...]

``kind`` is the stable TokenKind tag; ``start``/``end`` are absolute byte
offsets; ``text`` is the matched substring (JSON escapes any quotes).

Parse results and errors use a ``_type`` / ``kind`` discriminator so a
consumer can rebuild them without importing Arroba.

Example:
    from arroba.serialization import highlight_first_line_json, spans_from_json

    payload = highlight_first_line_json("@option key=value")
    spans = spans_from_json(payload)

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from arroba.errors import ParseError
from arroba.lexer import tokenize_first_line
from arroba.nodes import Directive, Empty, ParsedLine
from arroba.tokens import TokenKind, TokenSpan

if TYPE_CHECKING:
    from collections.abc import Iterable

    from arroba.analysis import HeaderAnalysis

_SPAN_FIELDS = ("kind", "start", "end", "text")

# Compact separators match the array-of-records wire format
_COMPACT = (",", ":")


def span_to_dict(span: TokenSpan) -> dict[str, Any]:
    """Convert a span to a JSON-compatible record."""
    return {
        "kind": span.kind.value,
        "start": span.start,
        "end": span.end,
        "text": span.text,
    }


def span_from_dict(data: dict[str, Any]) -> TokenSpan:
    """Rebuild a span from a record produced by span_to_dict.

    Raises:
        ValueError: If ``data`` is not a record, a field is missing, or
            ``kind`` is not a known tag.
    """
    if not isinstance(data, dict):
        msg = f"Expected a span record, got {type(data).__name__}"
        raise ValueError(msg)
    missing = [name for name in _SPAN_FIELDS if name not in data]
    if missing:
        msg = f"Missing span field(s): {', '.join(missing)}"
        raise ValueError(msg)
    try:
        kind = TokenKind(data["kind"])
    except ValueError:
        msg = f"Unknown token kind: {data['kind']!r}"
        raise ValueError(msg) from None
    try:
        start = int(data["start"])
        end = int(data["end"])
    except (TypeError, ValueError):
        msg = f"Span offsets must be integers: {data['start']!r}, {data['end']!r}"
        raise ValueError(msg) from None
    return TokenSpan(kind=kind, start=start, end=end, text=str(data["text"]))


def spans_to_json(spans: Iterable[TokenSpan], *, indent: int | None = None) -> str:
    """Serialize spans to the JSON wire format.

    Args:
        spans: Spans in source order.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON array string.

    """
    records = [span_to_dict(span) for span in spans]
    if indent is None:
        return json.dumps(records, separators=_COMPACT, ensure_ascii=False)
    return json.dumps(records, indent=indent, ensure_ascii=False)


def spans_from_json(data: str) -> tuple[TokenSpan, ...]:
    """Deserialize spans from the JSON wire format.

    Raises:
        ValueError: If the JSON is not an array of span records.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array of spans, got {type(raw).__name__}"
        raise ValueError(msg)
    return tuple(span_from_dict(item) for item in raw)


def highlight_first_line_json(source: str) -> str:
    """Tokenize the first non-blank line and serialize the spans.

    Returns ``"[]"`` when there is nothing to highlight.
    """
    return spans_to_json(tokenize_first_line(source))


def parsed_to_dict(parsed: ParsedLine) -> dict[str, Any]:
    """Convert a parse result to a JSON-compatible dict."""
    if isinstance(parsed, Empty):
        return {"_type": "Empty"}
    return {
        "_type": "Directive",
        "name": parsed.name,
        "pairs": [[key, value] for key, value in parsed.pairs],
    }


def parsed_from_dict(data: dict[str, Any]) -> ParsedLine:
    """Rebuild a parse result from a dict produced by parsed_to_dict.

    Raises:
        ValueError: If ``_type`` is missing or unknown, or a Directive has
            no ``name``.
    """
    if not isinstance(data, dict):
        msg = f"Expected a result record, got {type(data).__name__}"
        raise ValueError(msg)
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized result"
        raise ValueError(msg)
    if type_name == "Empty":
        return Empty()
    if type_name == "Directive":
        if "name" not in data:
            msg = "Missing 'name' field in serialized Directive"
            raise ValueError(msg)
        try:
            pairs = tuple((str(key), str(value)) for key, value in data.get("pairs", ()))
        except (TypeError, ValueError):
            msg = f"Directive pairs must be [key, value] lists: {data.get('pairs')!r}"
            raise ValueError(msg) from None
        return Directive(name=str(data["name"]), pairs=pairs)
    msg = f"Unknown result type: {type_name!r}"
    raise ValueError(msg)


def error_to_dict(error: ParseError) -> dict[str, Any]:
    """Convert a parse error to a JSON-compatible dict."""
    return {
        "kind": error.kind.value,
        "message": error.message,
        "lineno": error.lineno,
        "col_offset": error.col_offset,
    }


def analysis_to_dict(analysis: HeaderAnalysis) -> dict[str, Any]:
    """Convert a HeaderAnalysis to a JSON-compatible dict."""
    return {
        "parsed": parsed_to_dict(analysis.parsed) if analysis.parsed is not None else None,
        "error": error_to_dict(analysis.error) if analysis.error is not None else None,
        "spans": [span_to_dict(span) for span in analysis.spans],
    }


def analysis_to_json(analysis: HeaderAnalysis, *, indent: int | None = None) -> str:
    """Serialize a HeaderAnalysis to a JSON string."""
    return json.dumps(analysis_to_dict(analysis), indent=indent, ensure_ascii=False)


__all__ = [
    "analysis_to_dict",
    "analysis_to_json",
    "error_to_dict",
    "highlight_first_line_json",
    "parsed_from_dict",
    "parsed_to_dict",
    "span_from_dict",
    "span_to_dict",
    "spans_from_json",
    "spans_to_json",
]
