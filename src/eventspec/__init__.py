"""
Event Filter Helpers (eventspec)

Small, pure helpers a web framework uses when deciding whether a handler
or validation method applies to the event being dispatched.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Request handling
    - Annotation processing
    - The validation framework

It answers yes/no questions about small lists of event names.

Layers:
    collection_util  the three core predicates
    model            typed, immutable event filters
    analyzer         read-only diagnostics
    serialization    JSON/YAML filter files
"""

from eventspec.collection_util import contains, event_applies, is_empty

__version__ = "0.1.0"

__all__ = ["contains", "event_applies", "is_empty"]
