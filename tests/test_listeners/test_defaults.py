"""Tests for the null and console listeners."""

from __future__ import annotations

import io
import sys

import pytest

from parse_listeners.exceptions import ConfigurationError
from parse_listeners.listeners import (
    CONSOLE_LISTENER,
    ConsoleListener,
    NullListener,
    dispatch,
    format_syntax_error,
)


class TestNullListener:
    def test_all_methods_are_noop(self, all_events) -> None:
        listener = NullListener()
        for event in all_events:
            assert dispatch(listener, event) is None

    def test_tolerates_null_fields(self) -> None:
        listener = NullListener()
        listener.on_syntax_error(None, None, 0, 0, "")
        listener.on_report_ambiguity(None, None, 0, 0, False, None, None)
        listener.on_report_attempting_full_context(None, None, 0, 0, None, None)
        listener.on_report_context_sensitivity(None, None, 0, 0, 0, None)

    def test_partial_override_inherits_noops(self, ambiguity_event) -> None:
        class SyntaxOnly(NullListener):
            def __init__(self) -> None:
                self.messages: list[str] = []

            def on_syntax_error(
                self, recognizer, offending_symbol, line, column, message, cause=None
            ):
                self.messages.append(message)

        listener = SyntaxOnly()
        dispatch(listener, ambiguity_event)
        assert listener.messages == []


class TestConsoleListener:
    def test_format_is_exact(self) -> None:
        text = format_syntax_error(3, 7, "mismatched input")
        assert text == "line 3:7 mismatched input"

    def test_writes_one_line_to_stream(self, recognizer) -> None:
        stream = io.StringIO()
        listener = ConsoleListener(stream)

        listener.on_syntax_error(recognizer, None, 3, 7, "mismatched input")

        assert stream.getvalue() == "line 3:7 mismatched input\n"

    def test_defaults_to_stderr(self, recognizer, capsys) -> None:
        ConsoleListener().on_syntax_error(recognizer, None, 3, 7, "mismatched input")

        captured = capsys.readouterr()
        assert captured.err == "line 3:7 mismatched input\n"
        assert captured.out == ""

    def test_message_is_not_decorated(self, recognizer) -> None:
        stream = io.StringIO()
        ConsoleListener(stream).on_syntax_error(
            recognizer, None, 1, 0, "extraneous input 'x' expecting ';'"
        )
        assert stream.getvalue() == "line 1:0 extraneous input 'x' expecting ';'\n"

    @pytest.mark.parametrize(
        "fixture_name",
        ["ambiguity_event", "full_context_event", "context_sensitivity_event"],
    )
    def test_ignores_prediction_reports(self, fixture_name, request) -> None:
        stream = io.StringIO()
        dispatch(ConsoleListener(stream), request.getfixturevalue(fixture_name))
        assert stream.getvalue() == ""

    def test_shared_instance(self) -> None:
        assert isinstance(CONSOLE_LISTENER, ConsoleListener)
        assert CONSOLE_LISTENER.stream is not None

    def test_named_stream_follows_redirection(self, recognizer, monkeypatch) -> None:
        listener = ConsoleListener("stdout")
        redirected = io.StringIO()
        monkeypatch.setattr(sys, "stdout", redirected)

        listener.on_syntax_error(recognizer, None, 4, 1, "token recognition error")

        assert redirected.getvalue() == "line 4:1 token recognition error\n"

    def test_unknown_stream_name(self) -> None:
        with pytest.raises(ConfigurationError):
            ConsoleListener("stdlog")  # type: ignore[arg-type]
