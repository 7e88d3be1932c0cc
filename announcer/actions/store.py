"""
Action store: the table of registered actions.

Names are folded case-insensitively, so "greet", "Greet" and "GREET" all
refer to the same entry. Invalid descriptors are never stored; they are
reported through the notifier, which routes them to the ERROR severity.
"""

import dataclasses
import threading
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterator, List, Optional

from ..core.logging import get_logger
from ..core.models import Action, Notice, normalize_name
from ..core.severity import Severity

logger = get_logger()

# notify(severity, notice_name, *results)
Notifier = Callable[..., None]


class ActionStore:
    """Case-insensitive mapping from action name to Action."""

    def __init__(self, notify: Notifier):
        """
        Initialize an empty store.

        Args:
            notify: Called as notify(severity, notice_name, *results) to report
                validation failures and overwrites
        """
        self._notify = notify
        self._actions: Dict[str, Action] = {}
        self._lock = threading.RLock()

    def register(self, name: Any, action: Any) -> None:
        """
        Validate and store an action, replacing any prior entry.

        Validation failures are reported through the ERROR severity and
        leave the store untouched.

        Args:
            name: Action name, matched case-insensitively
            action: An Action or a mapping with the same fields
        """
        if not isinstance(name, str):
            self._fail(Notice.INVALID_NAME, name=name)
            return

        key = normalize_name(name)
        if Severity.is_reserved(key):
            self._fail(Notice.RESERVED_NAME, name=key)
            return

        if isinstance(action, Action):
            descriptor = action
        elif isinstance(action, Mapping):
            descriptor = Action.from_dict(action)
        else:
            self._fail(Notice.INVALID_ACTION, name=key)
            return

        if not callable(descriptor.method):
            self._fail(Notice.INVALID_METHOD, name=key)
            return

        severity = None
        if descriptor.severity is not None:
            severity = Severity.parse(descriptor.severity)
            if severity is None:
                self._fail(
                    Notice.INVALID_SEVERITY, name=key, severity=descriptor.severity
                )
                return

        if descriptor.icon is not None and not isinstance(descriptor.icon, str):
            self._fail(Notice.INVALID_ICON, name=key)
            return

        stored = dataclasses.replace(descriptor, name=key, severity=severity)
        # Reentrant: a WARN callback on this thread may register actions itself
        with self._lock:
            if key in self._actions and not descriptor.suppress_overwrite_warning:
                self._notify(
                    Severity.WARN,
                    Notice.ACTION_OVERWRITTEN.name,
                    Notice.ACTION_OVERWRITTEN.render(name=key),
                )
            self._actions[key] = stored
        logger.debug(f"Registered action: {key} ({stored.effective_severity})")

    def register_all(self, actions: Mapping) -> None:
        """Register every entry of a mapping, keys as names, in order."""
        for name, action in actions.items():
            self.register(name, action)

    def resolve(self, name: str) -> Optional[Action]:
        """Look up an action by case-insensitive name."""
        with self._lock:
            return self._actions.get(normalize_name(name))

    def names(self) -> List[str]:
        """Registered names in registration order."""
        with self._lock:
            return list(self._actions)

    def _fail(self, notice: Notice, **kwargs: Any) -> None:
        message = notice.render(**kwargs)
        logger.error(f"Rejected action registration: {message}")
        self._notify(Severity.ERROR, notice.name, message)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        with self._lock:
            return normalize_name(name) in self._actions

    def __len__(self) -> int:
        with self._lock:
            return len(self._actions)

    def __iter__(self) -> Iterator[Action]:
        with self._lock:
            return iter(list(self._actions.values()))
