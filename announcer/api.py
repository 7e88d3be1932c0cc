"""
Module-level shorthand over a default Announcer.

    from announcer.api import load_action, run

    load_action("greet", {"method": lambda n: f"hi {n}"})
    run("greet", "Sam")

Each function delegates to the process-wide instance returned by
get_announcer(). Code that needs isolation should create its own
Announcer instead.
"""

from typing import Any, Mapping, Optional

from .actions.callbacks import Callback
from .actions.dispatcher import Announcer

# Global Announcer instance - created on first use
_announcer: Optional[Announcer] = None


def get_announcer() -> Announcer:
    """Get or create the default announcer."""
    global _announcer
    if _announcer is None:
        _announcer = Announcer()
    return _announcer


def set_announcer(announcer: Announcer) -> Announcer:
    """Replace the default announcer, e.g. with one built from config."""
    global _announcer
    _announcer = announcer
    return announcer


def reset_announcer() -> None:
    """Drop the default announcer along with its registered actions and callbacks."""
    global _announcer
    _announcer = None


def load_action(name: str, action: Any) -> None:
    get_announcer().load_action(name, action)


def load_actions(actions: Mapping[str, Any]) -> None:
    get_announcer().load_actions(actions)


def register_method_callback(severity: Any, callback: Callback) -> None:
    get_announcer().register_method_callback(severity, callback)


def clear_method_callback(severity: Any) -> None:
    get_announcer().clear_method_callback(severity)


def run(name: Any, *args: Any) -> None:
    get_announcer().run(name, *args)
