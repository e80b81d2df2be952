"""
Event Filter Model

Typed wrapper around the raw event lists handed to a dispatcher, usually
the value of an `on` attribute on a handler or validation method:

    on = ["save", "update"]       (only these events)
    on = ["!cancel"]              (every event except these)
    on = None / []                (every event)

ARCHITECTURAL RULE:
    Evaluation lives in collection_util.
    These objects only hold the declared entries and delegate to it,
    so a typed spec and a raw list always agree.
"""

import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from eventspec.collection_util import NEGATION_MARKER, event_applies, is_negative


class EventSpecError(ValueError):
    """Raised when an event filter cannot be built from the given input."""
    pass


class Polarity(Enum):
    """How an event filter treats the events it lists."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    UNRESTRICTED = "unrestricted"


def _is_negated(entry: Optional[str]) -> bool:
    return isinstance(entry, str) and entry.startswith(NEGATION_MARKER)


@dataclass(frozen=True)
class EventSpec:
    """
    An immutable event filter.

    Properties:
        events:
            Declared entries in order, or None when nothing was declared.
            An empty tuple and None both allow every event, but are kept
            apart so that serialization round-trips exactly.

    Example:
        EventSpec.parse("save, !delete")
        EventSpec.parse(["!view"]).applies("save")  -> True
    """

    events: Optional[Tuple[Optional[str], ...]] = None

    @classmethod
    def parse(cls, on: Union[None, str, Sequence[Optional[str]]]) -> "EventSpec":
        """
        Build a spec from an `on` value.

        Accepts None, a sequence of strings (None entries allowed), or a
        comma-separated string. Pieces of a string are stripped and blank
        pieces are skipped; sequence entries are kept verbatim.

        Raises:
            EventSpecError: If `on` is a mapping or not iterable, or an
                entry is neither a string nor None
        """
        if on is None:
            return cls(events=None)

        if isinstance(on, str):
            entries = tuple(piece.strip() for piece in on.split(",") if piece.strip())
        elif isinstance(on, Mapping):
            raise EventSpecError(f"Event filter must be a string or a sequence, got {type(on).__name__}")
        else:
            try:
                entries = tuple(on)
            except TypeError:
                raise EventSpecError(f"Event filter must be a string or a sequence, got {type(on).__name__}")
            for entry in entries:
                if entry is not None and not isinstance(entry, str):
                    raise EventSpecError(f"Event names must be strings, got {entry!r}")

        spec = cls(events=entries)
        if spec.mixed_entries:
            warnings.warn(
                f"Mixed polarity in event filter {list(entries)}: "
                f"{', '.join(spec.mixed_entries)} will be matched literally",
                UserWarning,
            )
        return spec

    @property
    def polarity(self) -> Polarity:
        if not self.events:
            return Polarity.UNRESTRICTED
        if is_negative(self.events):
            return Polarity.NEGATIVE
        return Polarity.POSITIVE

    @property
    def is_unrestricted(self) -> bool:
        return self.polarity is Polarity.UNRESTRICTED

    @property
    def mixed_entries(self) -> List[str]:
        """Entries after the first whose own prefix disagrees with the polarity."""
        if not self.events:
            return []
        negative = is_negative(self.events)
        return [
            entry for entry in self.events[1:]
            if entry and _is_negated(entry) != negative
        ]

    @property
    def event_names(self) -> List[str]:
        """Declared event names without markers, blanks, or repeats."""
        names: List[str] = []
        for entry in self.events or ():
            if not entry:
                continue
            name = entry[len(NEGATION_MARKER):] if _is_negated(entry) else entry
            if name and name not in names:
                names.append(name)
        return names

    def applies(self, event: Optional[str]) -> bool:
        return event_applies(self.events, event)


@dataclass(frozen=True)
class HandlerFilter:
    """
    Binds a handler name to the event filter declared on it.

    Properties:
        name: Handler or validation method name (e.g., "validateUser")
        spec: Its event filter
    """

    name: str
    spec: EventSpec = EventSpec()

    def applies(self, event: Optional[str]) -> bool:
        return self.spec.applies(event)


def applicable_handlers(filters: Iterable[HandlerFilter], event: Optional[str]) -> List[str]:
    """Names of the handlers whose filter lets `event` through, in declaration order."""
    return [f.name for f in filters if f.applies(event)]


__all__ = [
    "EventSpec",
    "EventSpecError",
    "HandlerFilter",
    "Polarity",
    "applicable_handlers",
]
