#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2annotated/annotated/serialization.py
"""JSON serialization and deserialization for annotated text.

The dictionary form is the hand-off format for rendering collaborators that
live outside the Python process. Each style is written as a mapping with a
``type`` key naming the variant plus that variant's fields, and each range as
``{"start": ..., "end": ..., "item": ...}``.

Examples
--------
    >>> from html2annotated.annotated import AnnotatedText, Range
    >>> from html2annotated.annotated.styles import Bold
    >>> text = AnnotatedText("hi", styles=(Range(Bold(), 0, 2),))
    >>> annotated_to_json(text)
    '{"schema_version": 1, "text": "hi", "styles": [{"start": 0, "end": 2, "item": {"type": "Bold"}}], "links": []}'

"""

from __future__ import annotations

import json
import logging
from dataclasses import fields
from typing import Any

from html2annotated.annotated.styles import STYLE_TYPES, StyleAttribute
from html2annotated.annotated.text import AnnotatedText, Range
from html2annotated.constants import SERIALIZATION_SCHEMA_VERSION
from html2annotated.exceptions import ValidationError

logger = logging.getLogger(__name__)


def style_to_dict(style: StyleAttribute) -> dict[str, Any]:
    """Serialize a single style attribute to a dictionary."""
    result: dict[str, Any] = {"type": type(style).__name__}
    for f in fields(style):
        result[f.name] = getattr(style, f.name)
    return result


def dict_to_style(data: dict[str, Any]) -> StyleAttribute:
    """Deserialize a single style attribute.

    Raises
    ------
    ValidationError
        If the style type is unknown or its fields do not match the variant

    """
    data = dict(data)
    type_name = data.pop("type", None)
    cls = STYLE_TYPES.get(type_name) if isinstance(type_name, str) else None
    if cls is None:
        raise ValidationError(f"Unknown style type: {type_name!r}", parameter_name="type", parameter_value=type_name)
    try:
        return cls(**data)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"Invalid fields for style {type_name}: {e}", parameter_name=type_name, parameter_value=data, original_error=e
        ) from e


def _range_to_dict(annotation: Range[Any], item: Any) -> dict[str, Any]:
    return {"start": annotation.start, "end": annotation.end, "item": item}


def _dict_to_range(data: dict[str, Any], item: Any) -> Range[Any]:
    try:
        return Range(item, int(data["start"]), int(data["end"]))
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError(f"Invalid annotation range: {data!r}", parameter_value=data, original_error=e) from e


def _range_entries(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    """Return the range list stored under ``key``, checking its shape."""
    entries = data.get(key, [])
    if not isinstance(entries, list):
        raise ValidationError(f"'{key}' must be a list of ranges", parameter_name=key, parameter_value=entries)
    for entry in entries:
        if not isinstance(entry, dict):
            raise ValidationError(f"Each entry of '{key}' must be a mapping", parameter_name=key, parameter_value=entry)
        if key == "styles" and not isinstance(entry.get("item"), dict):
            raise ValidationError(
                "Style ranges must hold a style mapping in 'item'", parameter_name=key, parameter_value=entry
            )
    return entries


def annotated_to_dict(text: AnnotatedText) -> dict[str, Any]:
    """Convert annotated text to a JSON-compatible dictionary.

    Parameters
    ----------
    text : AnnotatedText
        The annotated text to serialize

    Returns
    -------
    dict
        Dictionary with ``text``, ``styles`` and ``links`` keys

    """
    return {
        "text": text.text,
        "styles": [_range_to_dict(a, style_to_dict(a.item)) for a in text.styles],
        "links": [_range_to_dict(a, a.item) for a in text.links],
    }


def annotated_from_dict(data: dict[str, Any]) -> AnnotatedText:
    """Reconstruct annotated text from its dictionary form.

    Raises
    ------
    ValidationError
        If the dictionary is missing keys, its range lists are malformed,
        it holds unknown style types or its ranges fall outside the text

    """
    if not isinstance(data, dict) or not isinstance(data.get("text"), str):
        raise ValidationError("Annotated text data must be a mapping with a 'text' string", parameter_value=data)

    styles = tuple(_dict_to_range(entry, dict_to_style(entry["item"])) for entry in _range_entries(data, "styles"))
    links = tuple(_dict_to_range(entry, str(entry.get("item", ""))) for entry in _range_entries(data, "links"))
    try:
        return AnnotatedText(data["text"], styles=styles, links=links)
    except ValueError as e:
        raise ValidationError(str(e), original_error=e) from e


def annotated_to_json(text: AnnotatedText, indent: int | None = None) -> str:
    """Serialize annotated text to a JSON string with a schema version.

    Parameters
    ----------
    text : AnnotatedText
        The annotated text to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string; Unicode characters are written unescaped

    """
    versioned = {"schema_version": SERIALIZATION_SCHEMA_VERSION, **annotated_to_dict(text)}
    return json.dumps(versioned, indent=indent, ensure_ascii=False)


def annotated_from_json(json_str: str, validate_schema: bool = True) -> AnnotatedText:
    """Deserialize annotated text from a JSON string.

    Parameters
    ----------
    json_str : str
        JSON produced by :func:`annotated_to_json`
    validate_schema : bool, default True
        If True, reject unsupported schema versions. If False, log a warning
        and attempt to load anyway.

    Raises
    ------
    ValidationError
        If the JSON is malformed or describes invalid annotated text

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Malformed annotated text JSON: {e}", original_error=e) from e
    if not isinstance(data, dict):
        raise ValidationError("Annotated text JSON must be an object", parameter_value=data)

    schema_version = data.pop("schema_version", SERIALIZATION_SCHEMA_VERSION)
    if schema_version != SERIALIZATION_SCHEMA_VERSION:
        if validate_schema:
            raise ValidationError(
                f"Unsupported schema version: {schema_version}. "
                f"This version of html2annotated supports schema version {SERIALIZATION_SCHEMA_VERSION} only.",
                parameter_name="schema_version",
                parameter_value=schema_version,
            )
        logger.warning(
            f"Schema version {schema_version} differs from supported version {SERIALIZATION_SCHEMA_VERSION}. "
            f"Attempting to parse anyway (schema validation disabled)."
        )

    return annotated_from_dict(data)


__all__ = [
    "style_to_dict",
    "dict_to_style",
    "annotated_to_dict",
    "annotated_from_dict",
    "annotated_to_json",
    "annotated_from_json",
]
