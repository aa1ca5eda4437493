"""
Flatten Attio attribute values into display strings.

Every Attio attribute value is an array of typed objects, even for
single-valued attributes. Tables and CSV need one string per cell, so
these helpers dispatch on ``attribute_type`` and pick the human-readable
field(s). JSON output never goes through here.
"""

from __future__ import annotations

import json
from typing import Any, Callable

MULTI_VALUE_SEPARATOR = ", "


def _text(value: Any) -> str:
    """Render a scalar the way it appears in JSON, without quotes."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


def _first(*candidates: Any) -> Any:
    """Return the first candidate that is not None."""
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None


def _date_part(timestamp: Any) -> str:
    return timestamp[:10] if isinstance(timestamp, str) else ""


def _nested_title(value: dict[str, Any], key: str) -> str:
    nested = value.get(key)
    if isinstance(nested, dict):
        return _text(nested.get("title")) if nested.get("title") else ""
    return ""


def _scalar(value: dict[str, Any]) -> str:
    return _text(value.get("value"))


def _currency(value: dict[str, Any]) -> str:
    return _text(_first(value.get("currency_value"), value.get("value")))


def _personal_name(value: dict[str, Any]) -> str:
    if value.get("full_name"):
        return _text(value["full_name"])
    first = _text(value.get("first_name"))
    last = _text(value.get("last_name"))
    return f"{first} {last}".strip()


def _email(value: dict[str, Any]) -> str:
    return _text(value.get("email_address") or value.get("original_email_address"))


def _phone(value: dict[str, Any]) -> str:
    return _text(value.get("original_phone_number") or value.get("phone_number"))


def _domain(value: dict[str, Any]) -> str:
    return _text(value.get("domain"))


def _select(value: dict[str, Any]) -> str:
    return _nested_title(value, "option")


def _status(value: dict[str, Any]) -> str:
    return _nested_title(value, "status")


def _location(value: dict[str, Any]) -> str:
    parts = (value.get("locality"), value.get("region"), value.get("country_code"))
    return MULTI_VALUE_SEPARATOR.join(_text(p) for p in parts if p)


def _record_reference(value: dict[str, Any]) -> str:
    return f"{_text(value.get('target_object'))}:{_text(value.get('target_record_id'))}"


def _actor_reference(value: dict[str, Any]) -> str:
    return f"member:{_text(value.get('referenced_actor_id'))}"


def _interaction(value: dict[str, Any]) -> str:
    return f"{_text(value.get('interaction_type'))} @ {_date_part(value.get('interacted_at'))}"


ATTRIBUTE_FLATTENERS: dict[str, Callable[[dict[str, Any]], str]] = {
    "text": _scalar,
    "number": _scalar,
    "checkbox": _scalar,
    "date": _scalar,
    "timestamp": _scalar,
    "rating": _scalar,
    "currency": _currency,
    "personal-name": _personal_name,
    "email-address": _email,
    "phone-number": _phone,
    "domain": _domain,
    "select": _select,
    "status": _status,
    "location": _location,
    "record-reference": _record_reference,
    "actor-reference": _actor_reference,
    "interaction": _interaction,
}


def flatten_single_value(value: Any) -> str:
    """
    Flatten one typed attribute value object.

    Unknown attribute types fall back to ``value``, then ``title``,
    then the compact JSON of the whole object.
    """
    if not value:
        return ""
    if not isinstance(value, dict):
        return _text(value)

    flattener = ATTRIBUTE_FLATTENERS.get(value.get("attribute_type", ""))
    if flattener is not None:
        return flattener(value)
    return _text(_first(value.get("value"), value.get("title"), json.dumps(value, separators=(",", ":"), default=str)))


def flatten_value(values: list[Any] | None) -> str:
    """
    Flatten an attribute's value array into one display string.

    Args:
        values: Attribute value array from the API

    Returns:
        Empty string for no values, multiple values joined with ", "
    """
    if not values:
        return ""
    if not isinstance(values, list):
        return flatten_single_value(values)
    return MULTI_VALUE_SEPARATOR.join(flatten_single_value(v) for v in values)


def _id_field(item: dict[str, Any], *keys: str) -> str:
    ident = item.get("id")
    if not isinstance(ident, dict):
        return _text(ident)
    for key in keys:
        if ident.get(key):
            return _text(ident[key])
    return ""


def _flatten_values_map(flat: dict[str, str], values: Any) -> dict[str, str]:
    if isinstance(values, dict):
        for key, attr_values in values.items():
            flat[key] = flatten_value(attr_values)
    return flat


def flatten_record(record: dict[str, Any]) -> dict[str, str]:
    """
    Flatten a record into a string map for table and CSV output.

    Columns are ``id``, ``created_at`` (date only), ``web_url`` when
    present, then one column per attribute slug.
    """
    flat = {
        "id": _id_field(record, "record_id", "entry_id"),
        "created_at": _date_part(record.get("created_at")),
    }
    if record.get("web_url"):
        flat["web_url"] = _text(record["web_url"])
    return _flatten_values_map(flat, record.get("values"))


def flatten_entry(entry: dict[str, Any]) -> dict[str, str]:
    """Flatten a list entry into a string map for table and CSV output."""
    flat = {
        "id": _id_field(entry, "entry_id"),
        "record_id": _text(entry.get("record_id") or entry.get("parent_record_id")),
        "created_at": _date_part(entry.get("created_at")),
    }
    return _flatten_values_map(flat, entry.get("entry_values"))
