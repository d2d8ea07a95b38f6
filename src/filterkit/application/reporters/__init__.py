"""Reporters for evaluation traces.

PlainTextReporter and JsonReporter use stdlib only.
ConsoleReporter renders through rich.
"""

from filterkit.application.reporters.console import ConsoleConfig, ConsoleReporter
from filterkit.application.reporters.json_reporter import (
    JsonReporter,
    predicate_to_dict,
    trace_to_dict,
)
from filterkit.application.reporters.plain_text import PlainTextReporter
from filterkit.application.reporters.protocol import ReporterProtocol

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "JsonReporter",
    "PlainTextReporter",
    "ReporterProtocol",
    "predicate_to_dict",
    "trace_to_dict",
]
