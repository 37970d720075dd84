"""Shared test fixtures for parse-listeners."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from parse_listeners.listeners.events import (
    AmbiguityEvent,
    ContextSensitivityEvent,
    FullContextAttemptEvent,
    SyntaxErrorEvent,
)


@dataclass
class FakeRecognizer:
    """Minimal recognizer: fixed rule names and token texts."""

    rule_names: list[str] = field(default_factory=lambda: ["prog", "expr", ""])
    tokens: list[str] = field(default_factory=lambda: ["a", "+", "b", "*", "c"])
    notifications: list[str] = field(default_factory=list)

    def get_input_text(self, start_index: int, stop_index: int) -> str:
        return "".join(self.tokens[start_index : stop_index + 1])

    def notify_error_listeners(self, message: str) -> None:
        self.notifications.append(message)


@dataclass(frozen=True)
class FakeDecisionTable:
    decision: int
    rule_index: int


@dataclass(frozen=True)
class FakeConfig:
    alt: int


@pytest.fixture
def recognizer():
    """A recognizer over the input ``a+b*c``."""
    return FakeRecognizer()


@pytest.fixture
def dfa():
    """Decision 4 inside rule ``expr``."""
    return FakeDecisionTable(decision=4, rule_index=1)


@pytest.fixture
def configs():
    return [FakeConfig(alt=2), FakeConfig(alt=1), FakeConfig(alt=2)]


@pytest.fixture
def syntax_error_event(recognizer):
    return SyntaxErrorEvent(
        recognizer=recognizer,
        offending_symbol="*",
        line=3,
        column=7,
        message="mismatched input",
        cause=None,
    )


@pytest.fixture
def ambiguity_event(recognizer, dfa, configs):
    return AmbiguityEvent(
        recognizer=recognizer,
        dfa=dfa,
        start_index=0,
        stop_index=2,
        exact=True,
        ambig_alts=frozenset({1, 2}),
        configs=configs,
    )


@pytest.fixture
def full_context_event(recognizer, dfa, configs):
    return FullContextAttemptEvent(
        recognizer=recognizer,
        dfa=dfa,
        start_index=1,
        stop_index=3,
        conflicting_alts=None,
        configs=configs,
    )


@pytest.fixture
def context_sensitivity_event(recognizer, dfa, configs):
    return ContextSensitivityEvent(
        recognizer=recognizer,
        dfa=dfa,
        start_index=2,
        stop_index=4,
        prediction=2,
        configs=configs,
    )


@pytest.fixture
def all_events(
    syntax_error_event, ambiguity_event, full_context_event, context_sensitivity_event
):
    """One event of each kind, in a plausible parse order."""
    return [
        full_context_event,
        context_sensitivity_event,
        ambiguity_event,
        syntax_error_event,
    ]
