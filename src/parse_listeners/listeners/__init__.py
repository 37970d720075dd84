"""Diagnostic listeners: protocol, defaults and fan-out."""

from parse_listeners.listeners.collecting import CollectingListener
from parse_listeners.listeners.composite import CompositeListener
from parse_listeners.listeners.console import (
    CONSOLE_LISTENER,
    ConsoleListener,
    format_syntax_error,
)
from parse_listeners.listeners.diagnostic import AmbiguityDiagnosticListener
from parse_listeners.listeners.events import (
    AmbiguityEvent,
    ContextSensitivityEvent,
    DiagnosticEvent,
    FullContextAttemptEvent,
    SyntaxErrorEvent,
    dispatch,
)
from parse_listeners.listeners.log import LoggingListener
from parse_listeners.listeners.null import NullListener
from parse_listeners.listeners.protocol import ErrorListener

__all__ = [
    "ErrorListener",
    "NullListener",
    "ConsoleListener",
    "CONSOLE_LISTENER",
    "format_syntax_error",
    "CompositeListener",
    "CollectingListener",
    "AmbiguityDiagnosticListener",
    "LoggingListener",
    "SyntaxErrorEvent",
    "AmbiguityEvent",
    "FullContextAttemptEvent",
    "ContextSensitivityEvent",
    "DiagnosticEvent",
    "dispatch",
]
