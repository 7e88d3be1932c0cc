from unittest.mock import Mock

import pytest

from announcer.actions.callbacks import CallbackRegistry
from announcer.core.exceptions import UnknownSeverityError
from announcer.core.severity import Severity


def test_register_and_fire():
    registry = CallbackRegistry()
    callback = Mock()

    registry.register("bug", callback)
    registry.fire(Severity.BUG, "LEAK", "3 handles")

    callback.assert_called_once_with("LEAK", "3 handles")


def test_fire_without_callback_is_a_no_op():
    CallbackRegistry().fire(Severity.ALERT, "NAME", 1)


def test_reregistering_replaces_callback():
    registry = CallbackRegistry()
    old, new = Mock(), Mock()

    registry.register(Severity.WARN, old)
    registry.register("warn", new)
    registry.fire(Severity.WARN, "W")

    old.assert_not_called()
    new.assert_called_once_with("W")
    assert registry.get(Severity.WARN) is new


def test_unknown_severity_raises_immediately():
    registry = CallbackRegistry()

    with pytest.raises(UnknownSeverityError):
        registry.register("LOUD", Mock())
    with pytest.raises(ValueError):
        registry.register(None, Mock())


def test_non_callable_callback_raises():
    with pytest.raises(TypeError):
        CallbackRegistry().register("ERROR", "not callable")


def test_clear():
    registry = CallbackRegistry()
    registry.register("ERROR", Mock())

    registry.clear("error")

    assert registry.get(Severity.ERROR) is None
    with pytest.raises(UnknownSeverityError):
        registry.clear("nope")
