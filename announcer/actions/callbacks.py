"""
Callback hooks: one optional observer per severity.

A callback fires alongside the builtin output whenever its severity is
announced, with the action name followed by the results.
"""

import threading
from typing import Any, Callable, Dict, Optional

from ..core.exceptions import UnknownSeverityError
from ..core.logging import get_logger
from ..core.severity import Severity

logger = get_logger()

Callback = Callable[..., Any]


class CallbackRegistry:
    """Mapping from Severity to a single user callback."""

    def __init__(self):
        self._callbacks: Dict[Severity, Callback] = {}
        self._lock = threading.RLock()

    def register(self, severity: Any, callback: Callback) -> None:
        """
        Install or replace the callback for a severity.

        Args:
            severity: A Severity or a case-insensitive severity name
            callback: Called as callback(action_name, *results)

        Raises:
            UnknownSeverityError: If severity names no known severity
            TypeError: If callback is not callable
        """
        level = Severity.parse(severity)
        if level is None:
            raise UnknownSeverityError(f"Unknown severity: {severity!r}")
        if not callable(callback):
            raise TypeError(f"Callback for {level} must be callable")

        with self._lock:
            replaced = level in self._callbacks
            self._callbacks[level] = callback
        if replaced:
            logger.debug(f"Replaced callback for {level}")
        else:
            logger.debug(f"Registered callback for {level}")

    def clear(self, severity: Any) -> None:
        """Remove the callback for a severity, if any."""
        level = Severity.parse(severity)
        if level is None:
            raise UnknownSeverityError(f"Unknown severity: {severity!r}")
        with self._lock:
            self._callbacks.pop(level, None)

    def get(self, severity: Severity) -> Optional[Callback]:
        with self._lock:
            return self._callbacks.get(severity)

    def fire(self, severity: Severity, name: Any, *results: Any) -> None:
        """Invoke the callback for severity, if one is registered."""
        callback = self.get(severity)
        if callback is not None:
            callback(name, *results)
