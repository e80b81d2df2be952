"""
Collection helpers for event filters.

Three stateless predicates over small in-memory sequences:
    - contains: membership with None-matches-None semantics
    - is_empty: "nothing but None and empty strings"
    - event_applies: inclusion/exclusion check of an event name

An event filter is a sequence of event names such as ["save", "delete"]
(positive, the event must be listed) or ["!view", "!cancel"] (negative,
the event must not be listed). Polarity comes from the FIRST entry only.

RULES:
    - None means "no sequence given" and is distinct from an empty one.
    - Inputs are never mutated.
    - Nothing here raises for odd input; every call returns a bool.
"""

from typing import Any, Optional, Sequence

NEGATION_MARKER = "!"


def contains(arr: Optional[Sequence[Any]], item: Any) -> bool:
    """
    Check whether an unsorted sequence holds an item.

    A None sequence never contains anything. A None item matches a None
    element; any other item is compared with ==.

    Args:
        arr: Sequence to scan, or None
        item: Value to look for, may be None

    Returns:
        True if the item is found, False otherwise
    """
    if arr is None:
        return False

    for element in arr:
        if item is None and element is None:
            return True
        if item is not None and item == element:
            return True

    return False


def is_empty(arr: Optional[Sequence[Optional[str]]]) -> bool:
    """True for None, zero length, or only None/"" entries."""
    if arr is None or len(arr) == 0:
        return True
    for s in arr:
        if s is not None and s != "":
            return False

    return True


def is_negative(events: Optional[Sequence[Optional[str]]]) -> bool:
    """
    Whether an event filter is an exclusion list.

    Only the first entry is inspected. A first entry that is None or an
    empty string has no marker and counts as positive.
    """
    if not events:
        return False
    first = events[0]
    return isinstance(first, str) and first.startswith(NEGATION_MARKER)


def event_applies(events: Optional[Sequence[Optional[str]]], event: Optional[str]) -> bool:
    """
    Check whether an event passes an event filter.

    Examples:
        event_applies(None, "save")                -> True
        event_applies(["save", "delete"], "save")  -> True
        event_applies(["save", "delete"], "view")  -> False
        event_applies(["!delete"], "delete")       -> False

    Mixed filters such as ["save", "!delete"] are not rejected: the first
    entry picks the mode and the rest are matched literally.

    Args:
        events: Event filter, or None for "no restriction"
        event: Event name being dispatched

    Returns:
        True if the filter lets the event through
    """
    if events is None or len(events) == 0:
        return True

    if not is_negative(events):
        return contains(events, event)

    # an absent event has no negated form to exclude
    if event is None:
        return True
    return not contains(events, NEGATION_MARKER + event)


__all__ = [
    "NEGATION_MARKER",
    "contains",
    "is_empty",
    "is_negative",
    "event_applies",
]
