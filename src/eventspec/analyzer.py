"""
Event Filter Analyzer — diagnostics for declared event filters.

Flags filters that are legal but probably not what the author meant:
    - Blank or None first entry (silently positive)
    - Mixed polarity (["save", "!delete"])
    - Duplicate entries
    - Filters made only of blanks (allow nothing)

IMPORTANT: This is read-only. It never changes how a filter evaluates,
it only produces reports.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Union

from eventspec.collection_util import is_empty
from eventspec.model import EventSpec, HandlerFilter, Polarity


@dataclass
class EventSpecReport:
    """Analysis report for a single event filter."""

    name: Optional[str] = None
    polarity: Polarity = Polarity.UNRESTRICTED
    total_entries: int = 0
    blank_entries: int = 0
    null_entries: int = 0
    duplicate_entries: List[str] = field(default_factory=list)
    mixed_polarity_entries: List[str] = field(default_factory=list)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)

    @property
    def ok(self) -> bool:
        return not self.warnings


def analyze_event_spec(
    spec: Union[EventSpec, Sequence[Optional[str]], None],
    name: Optional[str] = None,
) -> EventSpecReport:
    """
    Inspect an event filter.

    Accepts an EventSpec or a raw sequence (None allowed). Raw input is
    wrapped without going through EventSpec.parse, so no UserWarning is
    emitted here; everything ends up in the report instead.
    """
    if not isinstance(spec, EventSpec):
        spec = EventSpec(events=None if spec is None else tuple(spec))

    report = EventSpecReport(name=name, polarity=spec.polarity)
    events = spec.events or ()

    # 1. Counts
    report.total_entries = len(events)
    report.null_entries = sum(1 for e in events if e is None)
    report.blank_entries = sum(1 for e in events if e == "")

    counts = Counter(e for e in events if e)
    report.duplicate_entries = sorted(e for e, n in counts.items() if n > 1)

    report.mixed_polarity_entries = spec.mixed_entries

    # 2. Warnings
    if events and not events[0]:
        report.add_warning(
            f"First entry is {events[0]!r}: filter treated as positive"
        )

    if events and is_empty(events):
        report.add_warning("Filter contains only blank entries: no named event can apply")

    if report.mixed_polarity_entries:
        report.add_warning(
            f"Mixed polarity ({report.polarity.value} filter): "
            f"{', '.join(report.mixed_polarity_entries)} matched literally"
        )

    if report.duplicate_entries:
        report.add_warning(f"Duplicate entries: {', '.join(report.duplicate_entries)}")

    return report


def analyze_filters(filters: Iterable[HandlerFilter]) -> List[EventSpecReport]:
    """Analyze each handler filter, one report per filter in declaration order."""
    return [analyze_event_spec(f.spec, name=f.name) for f in filters]


if __name__ == '__main__':
    # simple CLI for checking a filters file
    import argparse
    from eventspec.model import applicable_handlers
    from eventspec.serialization import load_filters_file

    parser = argparse.ArgumentParser(description='Analyze event filters and check which handlers apply')
    parser.add_argument('filters_file', help='Path to a YAML or JSON filters file')
    parser.add_argument('events', nargs='*', help='Event names to dispatch against the filters')
    args = parser.parse_args()

    filters = load_filters_file(args.filters_file)
    reports = analyze_filters(filters)

    print('Event filter report:')
    for report in reports:
        print(f'\nHandler: {report.name}')
        print(f' Polarity: {report.polarity.value}')
        print(f' Entries : {report.total_entries}')
        if report.warnings:
            for msg in report.warnings:
                print(f' Warning : {msg}')
        else:
            print(' No issues found')

    for event in args.events:
        handlers = applicable_handlers(filters, event)
        print(f'\nEvent {event!r}:', ', '.join(handlers) if handlers else '(no handlers)')
