"""Listener that reports prediction events back as syntax errors."""

from __future__ import annotations

from typing import AbstractSet, Iterable

from parse_listeners.listeners.null import NullListener
from parse_listeners.recognizer import DecisionTable, PredictionConfig, Recognizer


class AmbiguityDiagnosticListener(NullListener):
    """Turns ambiguity and context-sensitivity reports into error messages.

    Useful while developing a grammar: each prediction event is described
    (decision, rule, alternatives, input text) and handed back to the
    recognizer through ``notify_error_listeners`` so it reaches the same
    listeners as ordinary syntax errors.

    Args:
        exact_only: Report only exact ambiguities. Inexact ones are skipped.
    """

    def __init__(self, exact_only: bool = True) -> None:
        self.exact_only = exact_only

    def on_report_ambiguity(
        self,
        recognizer: Recognizer,
        dfa: DecisionTable,
        start_index: int,
        stop_index: int,
        exact: bool,
        ambig_alts: AbstractSet[int] | None,
        configs: Iterable[PredictionConfig],
    ) -> None:
        if self.exact_only and not exact:
            return
        decision = self.decision_description(recognizer, dfa)
        alts = format_alts(self.conflicting_alts(ambig_alts, configs))
        text = recognizer.get_input_text(start_index, stop_index)
        recognizer.notify_error_listeners(
            f"reportAmbiguity d={decision}: ambigAlts={alts}, input='{text}'"
        )

    def on_report_attempting_full_context(
        self,
        recognizer: Recognizer,
        dfa: DecisionTable,
        start_index: int,
        stop_index: int,
        conflicting_alts: AbstractSet[int] | None,
        configs: Iterable[PredictionConfig],
    ) -> None:
        decision = self.decision_description(recognizer, dfa)
        text = recognizer.get_input_text(start_index, stop_index)
        recognizer.notify_error_listeners(
            f"reportAttemptingFullContext d={decision}, input='{text}'"
        )

    def on_report_context_sensitivity(
        self,
        recognizer: Recognizer,
        dfa: DecisionTable,
        start_index: int,
        stop_index: int,
        prediction: int,
        configs: Iterable[PredictionConfig],
    ) -> None:
        decision = self.decision_description(recognizer, dfa)
        text = recognizer.get_input_text(start_index, stop_index)
        recognizer.notify_error_listeners(
            f"reportContextSensitivity d={decision}, input='{text}'"
        )

    @staticmethod
    def decision_description(recognizer: Recognizer, dfa: DecisionTable) -> str:
        """``"<decision> (<rule name>)"``, or just the decision number."""
        decision = dfa.decision
        rule_index = dfa.rule_index
        rule_names = recognizer.rule_names
        if rule_index < 0 or rule_index >= len(rule_names):
            return str(decision)
        rule_name = rule_names[rule_index]
        if not rule_name:
            return str(decision)
        return f"{decision} ({rule_name})"

    @staticmethod
    def conflicting_alts(
        reported_alts: AbstractSet[int] | None,
        configs: Iterable[PredictionConfig],
    ) -> frozenset[int]:
        """The reported alternatives, or every alternative seen in ``configs``."""
        if reported_alts is not None:
            return frozenset(reported_alts)
        return frozenset(config.alt for config in configs)


def format_alts(alts: AbstractSet[int]) -> str:
    """Render an alternative set as ``{1, 2}`` in ascending order."""
    return "{" + ", ".join(str(alt) for alt in sorted(alts)) + "}"
