"""
Serialization helpers for event filters (EventSpec, HandlerFilter).

Provides lossless JSON/YAML round-trip via an intermediate dict:

    filters:
      - name: validateSave
        on: [save, update]
      - name: audit
        on: ["!view"]
      - name: always
        on: null

An absent `on` key and `on: null` both mean "no filter"; `on: []` is kept
as an empty filter. Handler names must be unique within a document.

YAML NOTE:
    Event names that YAML 1.1 reads as booleans (yes, no, on, off, true,
    false, ...) must be quoted, e.g. on: [save, "no"]. Unquoted, they are
    rejected with EventSpecError since their spelling is lost on load.
"""
from __future__ import annotations

import json
import os
from typing import Any, Dict, Iterable, List

import yaml

from eventspec.model import EventSpec, EventSpecError, HandlerFilter


def spec_to_dict(spec: EventSpec) -> Dict[str, Any]:
    if not isinstance(spec, EventSpec):
        raise TypeError(f"Unsupported event spec type: {type(spec)}")
    return {"on": None if spec.events is None else list(spec.events)}


def spec_from_dict(d: Dict[str, Any]) -> EventSpec:
    if not isinstance(d, dict):
        raise EventSpecError(f"Event spec must be a mapping, got {type(d).__name__}")
    # YAML 1.1 loads a bare `on` key as the boolean True
    on = d["on"] if "on" in d else d.get(True)
    if isinstance(on, list):
        for entry in on:
            if isinstance(entry, bool):
                raise EventSpecError(
                    f"Event name loaded as boolean {entry!r}: quote names like yes/no/on/off"
                )
    return EventSpec.parse(on)


def filter_to_dict(f: HandlerFilter) -> Dict[str, Any]:
    if not isinstance(f, HandlerFilter):
        raise TypeError(f"Unsupported handler filter type: {type(f)}")
    return {"name": f.name, **spec_to_dict(f.spec)}


def filter_from_dict(d: Dict[str, Any]) -> HandlerFilter:
    if not isinstance(d, dict):
        raise EventSpecError(f"Handler filter must be a mapping, got {type(d).__name__}")
    name = d.get("name")
    if not name or not isinstance(name, str):
        raise EventSpecError(f"Handler filter is missing a name: {d}")
    return HandlerFilter(name=name, spec=spec_from_dict(d))


def filters_to_dict(filters: Iterable[HandlerFilter]) -> Dict[str, Any]:
    return {"filters": [filter_to_dict(f) for f in filters]}


def filters_from_dict(d: Any) -> List[HandlerFilter]:
    if d is None:
        return []
    if not isinstance(d, dict):
        raise EventSpecError(f"Filters document must be a mapping, got {type(d).__name__}")
    entries = d.get("filters") or []
    if not isinstance(entries, list):
        raise EventSpecError("'filters' must be a list")

    filters = [filter_from_dict(entry) for entry in entries]
    names = [f.name for f in filters]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise EventSpecError(f"Duplicate handler names: {', '.join(duplicates)}")
    return filters


def filters_to_json(filters: Iterable[HandlerFilter]) -> str:
    return json.dumps(filters_to_dict(filters), sort_keys=True)


def filters_from_json(s: str) -> List[HandlerFilter]:
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise EventSpecError(f"Invalid JSON filters document: {e}") from e
    return filters_from_dict(d)


def filters_to_yaml(filters: Iterable[HandlerFilter]) -> str:
    return yaml.safe_dump(filters_to_dict(filters))


def filters_from_yaml(s: str) -> List[HandlerFilter]:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise EventSpecError(f"Invalid YAML filters document: {e}") from e
    return filters_from_dict(d)


def load_filters_file(filepath: str) -> List[HandlerFilter]:
    """
    Load handler filters from a .json, .yaml or .yml file.

    Raises:
        FileNotFoundError: If file doesn't exist
        EventSpecError: If the document is malformed (syntax or structure)
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Filters file not found: {filepath}")

    if os.path.splitext(filepath)[1].lower() == ".json":
        return filters_from_json(content)
    return filters_from_yaml(content)
