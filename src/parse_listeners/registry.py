"""Mutable listener registry owned by a parser host."""

from __future__ import annotations

import logging
import threading

from parse_listeners.exceptions import ConfigurationError
from parse_listeners.listeners.composite import CompositeListener
from parse_listeners.listeners.console import CONSOLE_LISTENER
from parse_listeners.listeners.protocol import ErrorListener

logger = logging.getLogger(__name__)


class ListenerRegistry:
    """Listeners a host adds and removes between parses.

    ``dispatcher()`` freezes the current list into a CompositeListener for one
    parse session. Later changes to the registry do not reach composites that
    were already handed out.
    """

    def __init__(self, listeners: list[ErrorListener] | None = None) -> None:
        self._listeners: list[ErrorListener] = list(listeners or [])
        self._lock = threading.Lock()

    @classmethod
    def with_console(cls) -> ListenerRegistry:
        """Registry pre-loaded with the shared console listener."""
        return cls([CONSOLE_LISTENER])

    @property
    def listeners(self) -> tuple[ErrorListener, ...]:
        with self._lock:
            return tuple(self._listeners)

    def add(self, listener: ErrorListener) -> None:
        """Append a listener. Adding the same instance twice is allowed."""
        if listener is None:
            raise ConfigurationError("listener must not be None")
        with self._lock:
            self._listeners.append(listener)
        logger.debug("Added listener %s", type(listener).__name__)

    def remove(self, listener: ErrorListener) -> None:
        """Remove the first occurrence of a listener, if present."""
        with self._lock:
            for index, existing in enumerate(self._listeners):
                if existing is listener:
                    del self._listeners[index]
                    logger.debug("Removed listener %s", type(listener).__name__)
                    return

    def clear(self) -> None:
        with self._lock:
            self._listeners.clear()

    def dispatcher(self) -> CompositeListener:
        """Snapshot the registry into a fan-out listener.

        Raises:
            ConfigurationError: If no listeners are registered.
        """
        return CompositeListener(self.listeners)
