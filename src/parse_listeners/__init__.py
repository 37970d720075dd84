"""parse-listeners: Diagnostic listeners and fan-out for parsing engines."""

from parse_listeners.config import (
    ListenerManifest,
    ListenerSettings,
    build_listener,
    build_listeners,
    load_listeners,
    load_manifest,
)
from parse_listeners.exceptions import ConfigurationError, ParseListenersError
from parse_listeners.listeners import (
    CONSOLE_LISTENER,
    AmbiguityDiagnosticListener,
    AmbiguityEvent,
    CollectingListener,
    CompositeListener,
    ConsoleListener,
    ContextSensitivityEvent,
    DiagnosticEvent,
    ErrorListener,
    FullContextAttemptEvent,
    LoggingListener,
    NullListener,
    SyntaxErrorEvent,
    dispatch,
    format_syntax_error,
)
from parse_listeners.recognizer import DecisionTable, PredictionConfig, Recognizer
from parse_listeners.registry import ListenerRegistry

__version__ = "0.1.0"

__all__ = [
    "__version__",
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
    "Recognizer",
    "DecisionTable",
    "PredictionConfig",
    "ListenerRegistry",
    "ListenerManifest",
    "ListenerSettings",
    "load_manifest",
    "build_listener",
    "build_listeners",
    "load_listeners",
    "ParseListenersError",
    "ConfigurationError",
]
