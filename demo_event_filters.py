#!/usr/bin/env python3
"""
Demo: Declare a few handler filters, analyze them, and dispatch events.
"""

import warnings

from eventspec.analyzer import analyze_filters
from eventspec.model import EventSpec, HandlerFilter, applicable_handlers
from eventspec.serialization import filters_to_yaml


def build_filters():
    with warnings.catch_warnings():
        # the mixed filter below is deliberate, the analyzer reports it
        warnings.simplefilter("ignore", UserWarning)
        return [
            HandlerFilter("validateUser", EventSpec.parse(["save", "update"])),
            HandlerFilter("auditChanges", EventSpec.parse("!view, !cancel")),
            HandlerFilter("alwaysRun", EventSpec.parse(None)),
            HandlerFilter("confused", EventSpec.parse(["save", "!delete", "save"])),
        ]


def main():
    filters = build_filters()

    print("=" * 70)
    print("EVENT FILTERS")
    print("=" * 70)
    print(filters_to_yaml(filters))

    print("=" * 70)
    print("ANALYSIS")
    print("=" * 70)
    for report in analyze_filters(filters):
        status = "OK" if report.ok else "CHECK"
        print(f"  {report.name:<14} {report.polarity.value:<13} {status}")
        for msg in report.warnings:
            print(f"    - {msg}")
    print()

    print("=" * 70)
    print("DISPATCH")
    print("=" * 70)
    for event in ["save", "update", "view", "delete", "cancel"]:
        handlers = applicable_handlers(filters, event)
        print(f"  {event:<8} -> {', '.join(handlers) if handlers else '(none)'}")


if __name__ == "__main__":
    main()
