"""Listener that writes diagnostics to a standard library logger."""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import AbstractSet, Any, Mapping

from jinja2 import Environment, StrictUndefined, Template, TemplateSyntaxError, meta

from parse_listeners.exceptions import ConfigurationError
from parse_listeners.listeners.events import (
    AmbiguityEvent,
    ContextSensitivityEvent,
    DiagnosticEvent,
    FullContextAttemptEvent,
    SyntaxErrorEvent,
)

DEFAULT_LOGGER_NAME = "parse_listeners.diagnostics"

DEFAULT_TEMPLATES: dict[str, str] = {
    "syntax_error": "line {{ line }}:{{ column }} {{ message }}",
    "ambiguity": (
        "ambiguity at {{ start_index }}..{{ stop_index }} "
        "exact={{ exact }} alts={{ ambig_alts }}"
    ),
    "attempting_full_context": (
        "attempting full context at {{ start_index }}..{{ stop_index }} "
        "alts={{ conflicting_alts }}"
    ),
    "context_sensitivity": (
        "context sensitivity at {{ start_index }}..{{ stop_index }} "
        "prediction={{ prediction }}"
    ),
}

_EVENT_TYPES: dict[str, type] = {
    "syntax_error": SyntaxErrorEvent,
    "ambiguity": AmbiguityEvent,
    "attempting_full_context": FullContextAttemptEvent,
    "context_sensitivity": ContextSensitivityEvent,
}


def resolve_level(level: int | str) -> int:
    """Turn a level name such as ``"warning"`` into its numeric value."""
    if isinstance(level, int):
        return level
    mapping = logging.getLevelNamesMapping()
    try:
        return mapping[level.upper()]
    except KeyError:
        raise ConfigurationError(f"Unknown log level: {level}") from None


class LoggingListener:
    """Logs every diagnostic event through a Jinja2 message template.

    The event's fields are the template variables. The event itself is
    attached to the log record as ``diagnostic_event``.

    Args:
        logger: Logger or logger name. Defaults to ``parse_listeners.diagnostics``.
        level: Level for all records, as a number or a level name.
        templates: Per-kind overrides keyed ``syntax_error``, ``ambiguity``,
            ``attempting_full_context`` or ``context_sensitivity``.
    """

    def __init__(
        self,
        logger: logging.Logger | str | None = None,
        level: int | str = logging.WARNING,
        templates: Mapping[str, str] | None = None,
    ) -> None:
        if isinstance(logger, logging.Logger):
            self.logger = logger
        else:
            self.logger = logging.getLogger(logger or DEFAULT_LOGGER_NAME)
        self.level = resolve_level(level)
        self._templates = self._compile(templates or {})

    @staticmethod
    def _compile(overrides: Mapping[str, str]) -> dict[str, Template]:
        unknown = set(overrides) - set(DEFAULT_TEMPLATES)
        if unknown:
            raise ConfigurationError(
                f"Unknown template keys: {', '.join(sorted(unknown))}"
            )
        env = Environment(undefined=StrictUndefined)
        compiled: dict[str, Template] = {}
        for key, default in DEFAULT_TEMPLATES.items():
            source = overrides.get(key, default)
            try:
                parsed = env.parse(source)
            except TemplateSyntaxError as exc:
                raise ConfigurationError(
                    f"Invalid {key} template: {exc}", source=source
                ) from exc
            known = {f.name for f in fields(_EVENT_TYPES[key])}
            undeclared = meta.find_undeclared_variables(parsed) - known
            if undeclared:
                raise ConfigurationError(
                    f"Unknown variables in {key} template: "
                    f"{', '.join(sorted(undeclared))}",
                    source=source,
                )
            compiled[key] = env.from_string(source)
        return compiled

    def _emit(self, key: str, event: DiagnosticEvent) -> None:
        if not self.logger.isEnabledFor(self.level):
            return
        context = {f.name: getattr(event, f.name) for f in fields(event)}
        message = self._templates[key].render(**context)
        self.logger.log(self.level, message, extra={"diagnostic_event": event})

    def on_syntax_error(
        self,
        recognizer: Any,
        offending_symbol: Any,
        line: int,
        column: int,
        message: str,
        cause: BaseException | None = None,
    ) -> None:
        self._emit(
            "syntax_error",
            SyntaxErrorEvent(
                recognizer, offending_symbol, line, column, message, cause
            ),
        )

    def on_report_ambiguity(
        self,
        recognizer: Any,
        dfa: Any,
        start_index: int,
        stop_index: int,
        exact: bool,
        ambig_alts: AbstractSet[int] | None,
        configs: Any,
    ) -> None:
        self._emit(
            "ambiguity",
            AmbiguityEvent(
                recognizer, dfa, start_index, stop_index, exact, ambig_alts, configs
            ),
        )

    def on_report_attempting_full_context(
        self,
        recognizer: Any,
        dfa: Any,
        start_index: int,
        stop_index: int,
        conflicting_alts: AbstractSet[int] | None,
        configs: Any,
    ) -> None:
        self._emit(
            "attempting_full_context",
            FullContextAttemptEvent(
                recognizer, dfa, start_index, stop_index, conflicting_alts, configs
            ),
        )

    def on_report_context_sensitivity(
        self,
        recognizer: Any,
        dfa: Any,
        start_index: int,
        stop_index: int,
        prediction: int,
        configs: Any,
    ) -> None:
        self._emit(
            "context_sensitivity",
            ContextSensitivityEvent(
                recognizer, dfa, start_index, stop_index, prediction, configs
            ),
        )
