"""
Resolve record values from command-line input.

Values for create/update/assert commands come from, in order of
precedence: ``--values`` (inline JSON or ``@path``), repeated
``--set key=value`` pairs, or JSON piped on stdin.
"""

from __future__ import annotations

import json
import re
import sys
from pathlib import Path
from typing import Any, TextIO

from attio_cli.core.exceptions import NoValuesProvidedError, ValueInputError

NUMBER_PATTERN = re.compile(r"^-?\d+(\.\d+)?$")

FILE_PREFIX = "@"


def _strip_wrapping_quotes(raw: str) -> str:
    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in ("'", '"'):
        return raw[1:-1]
    return raw


def parse_scalar(raw: str) -> Any:
    """
    Coerce a --set value to a JSON scalar.

    Example:
        >>> parse_scalar("true")
        True
        >>> parse_scalar("-3.5")
        -3.5
        >>> parse_scalar("'acme'")
        'acme'
    """
    normalized = _strip_wrapping_quotes(raw.strip())
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    if normalized == "null":
        return None
    if NUMBER_PATTERN.match(normalized):
        return float(normalized) if "." in normalized else int(normalized)
    return normalized


def _parse_array(raw: str) -> list[Any]:
    try:
        parsed = json.loads(raw)
    except ValueError:
        parsed = None
    if isinstance(parsed, list):
        return parsed

    # Shorthand: [a,b,3]
    inner = raw[1:-1].strip()
    if not inner:
        return []
    return [parse_scalar(piece) for piece in inner.split(",")]


def parse_set_value(raw: str) -> Any:
    """Parse the right-hand side of one --set pair."""
    raw = raw.strip()
    if raw.startswith("{") and raw.endswith("}"):
        try:
            return json.loads(raw)
        except ValueError:
            pass
    if raw.startswith("[") and raw.endswith("]"):
        return _parse_array(raw)
    return parse_scalar(raw)


def parse_sets(pairs: list[str]) -> dict[str, Any]:
    """
    Parse repeated ``--set key=value`` pairs into a values object.

    Args:
        pairs: Raw "key=value" strings; later keys overwrite earlier ones

    Returns:
        Values dict with coerced values

    Raises:
        ValueInputError: If a pair has no "="
    """
    values: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep:
            raise ValueInputError(f'Invalid --set format: "{pair}". Expected: key=value')
        values[key.strip()] = parse_set_value(raw)
    return values


def load_json_argument(value: str) -> Any:
    """
    Parse a JSON option value, reading from a file when prefixed with "@".

    Raises:
        json.JSONDecodeError: If the content is not valid JSON
        OSError: If the referenced file cannot be read
    """
    if value.startswith(FILE_PREFIX):
        return json.loads(Path(value[len(FILE_PREFIX) :]).read_text(encoding="utf-8"))
    return json.loads(value)


def read_stdin(stream: TextIO | None = None) -> str:
    """Read piped input; an interactive terminal yields an empty string."""
    stream = stream if stream is not None else sys.stdin
    if stream is None or stream.isatty():
        return ""
    return stream.read()


def resolve_values(
    values: str | None = None,
    sets: list[str] | None = None,
    stdin: TextIO | None = None,
) -> dict[str, Any]:
    """
    Resolve the values object for a mutating command.

    Args:
        values: --values option (inline JSON or @path)
        sets: Repeated --set pairs
        stdin: Stream to read piped JSON from (defaults to sys.stdin)

    Returns:
        Values dict; empty when no input source applies

    Raises:
        json.JSONDecodeError: If --values, the file or stdin is malformed JSON
        ValueInputError: If a --set pair is malformed or JSON is not an object
    """
    if values:
        resolved = load_json_argument(values)
    elif sets:
        return parse_sets(sets)
    else:
        piped = read_stdin(stdin)
        if not piped.strip():
            return {}
        resolved = json.loads(piped)

    if not isinstance(resolved, dict):
        raise ValueInputError("Values must be a JSON object")
    return resolved


def require_values(values: dict[str, Any]) -> dict[str, Any]:
    """
    Reject an empty values object before a write is issued.

    Raises:
        NoValuesProvidedError: If values is empty
    """
    if not values:
        raise NoValuesProvidedError()
    return values
