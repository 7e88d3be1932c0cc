"""
Dispatcher: resolves an invocation name and announces the result.

An Announcer owns one action store and one callback registry, so several
independent announcers can live in the same process. Calling an announcer
(or its run method) with a name dispatches in this order:

    non-string name       -> UNDEFINED
    severity name         -> that severity, arguments passed through
    registered action     -> the action's severity, method results
    anything else         -> UNDEFINED

Action methods run under failure isolation: an exception raised by a
method is converted into an ACTION_FAILED report on the ERROR severity.
"""

from typing import Any, Dict, Mapping, Optional, Tuple

from ..core.exceptions import UnknownSeverityError
from ..core.logging import get_logger
from ..core.models import Action, Notice, normalize_name
from ..core.output import ConsoleOutput, OutputPrimitives, format_prefix, render_message
from ..core.severity import Channel, Severity
from .callbacks import Callback, CallbackRegistry
from .store import ActionStore

logger = get_logger()


def as_results(value: Any) -> Tuple[Any, ...]:
    """Spread a method's return value into a result sequence."""
    if value is None:
        return ()
    if isinstance(value, tuple):
        return value
    return (value,)


class Announcer:
    """
    Registers actions and announces them by name.

    Usage::

        announcer = Announcer()
        announcer.load_action("greet", Action(method=lambda n: f"hi {n}"))
        announcer("GREET", "Sam")        # 👍 GREET: hi Sam
        announcer.run("warn", "low disk") # ⚠️ WARN: low disk
    """

    def __init__(
        self,
        output: Optional[OutputPrimitives] = None,
        icons: Optional[Mapping[Any, str]] = None,
    ):
        """
        Initialize an announcer with empty registries.

        Args:
            output: Output primitives (defaults to Rich console output)
            icons: Per-severity icon overrides, keyed by Severity or name

        Raises:
            UnknownSeverityError: If an icon override names no severity
        """
        self.output = output if output is not None else ConsoleOutput()
        self.icons: Dict[Severity, str] = {}
        for key, icon in (icons or {}).items():
            severity = Severity.parse(key)
            if severity is None:
                raise UnknownSeverityError(f"Unknown severity in icons: {key!r}")
            if not isinstance(icon, str):
                raise TypeError(f"Icon for {severity} must be a string")
            self.icons[severity] = icon

        self.actions = ActionStore(notify=self.announce)
        self.callbacks = CallbackRegistry()

    def icon_for(self, severity: Severity) -> str:
        """Default icon of a severity, honoring overrides."""
        return self.icons.get(severity, severity.icon)

    # -- registration -------------------------------------------------------

    def load_action(self, name: str, action: Any) -> None:
        """Register one action; see ActionStore.register."""
        self.actions.register(name, action)

    def load_actions(self, actions: Mapping[str, Any]) -> None:
        """Register several actions, keys as names. Not atomic."""
        self.actions.register_all(actions)

    def register_method_callback(self, severity: Any, callback: Callback) -> None:
        """Install the callback fired whenever severity is announced."""
        self.callbacks.register(severity, callback)

    def clear_method_callback(self, severity: Any) -> None:
        self.callbacks.clear(severity)

    # -- dispatch -----------------------------------------------------------

    def run(self, name: Any, *args: Any) -> None:
        """
        Announce name with args.

        Args:
            name: Severity name, registered action name, or anything else
            *args: Arguments for the action method, or values to print

        Raises:
            FatalActionError: When the ERROR severity fires, directly or
                because an action method failed
        """
        if not isinstance(name, str):
            logger.debug(f"Dispatching non-string name {name!r} to UNDEFINED")
            self._undefined(name, args)
            return

        key = normalize_name(name)
        severity = Severity.parse(key)
        if severity is not None:
            logger.debug(f"Dispatching bare severity {key}")
            self.announce(severity, key, *args)
            return

        action = self.actions.resolve(key)
        if action is None:
            logger.debug(f"No action registered as {key}, dispatching to UNDEFINED")
            self._undefined(name, args)
            return

        logger.debug(f"Dispatching action {key} as {action.effective_severity}")
        self._execute(action, args)

    __call__ = run

    def announce(self, severity: Severity, name: Any, *results: Any) -> None:
        """Announce results under severity without running any action."""
        prefix = format_prefix(self.icon_for(severity), name)
        self._emit(severity, name, prefix, results)

    def _undefined(self, name: Any, args: Tuple[Any, ...]) -> None:
        severity = Severity.UNDEFINED
        prefix = format_prefix(self.icon_for(severity), severity.name)
        self._emit(severity, name, prefix, args, report_name=True)

    def _execute(self, action: Action, args: Tuple[Any, ...]) -> None:
        severity = action.effective_severity
        prefix = format_prefix(action.icon or self.icon_for(severity), action.name)
        try:
            results = as_results(action.method(*args))
        except Exception as e:
            logger.error(f"Action '{action.name}' failed: {e}")
            self.announce(
                Severity.ERROR,
                Notice.ACTION_FAILED.name,
                Notice.ACTION_FAILED.render(name=action.name),
                e,
            )
            return
        self._emit(severity, action.name, prefix, results)

    def _emit(
        self,
        severity: Severity,
        name: Any,
        prefix: str,
        results: Tuple[Any, ...],
        report_name: bool = False,
    ) -> None:
        self.callbacks.fire(severity, name, *results)

        values = (name, *results) if report_name else results
        if severity.channel is Channel.FATAL:
            self.output.raise_fatal(render_message(prefix, values))
        elif severity.channel is Channel.WARNING:
            self.output.write_warning(prefix, *values, style=severity.style)
        else:
            self.output.write_line(prefix, *values, style=severity.style)
