"""
Severity levels for announced messages.

Every severity is a fixed variant carrying its default icon, the output
channel its messages are written to, and the Rich style used when the
console renders them. Severity names are reserved: no action may be
registered under one of them.
"""

from enum import Enum
from typing import Any, Optional


class Channel(str, Enum):
    """Output primitive a severity is bound to."""

    LINE = "line"
    WARNING = "warning"
    FATAL = "fatal"


class Severity(Enum):
    """Closed set of severities: (icon, channel, style)."""

    ACTION = ("👍", Channel.LINE, "green")
    ALERT = ("🔔", Channel.LINE, "cyan")
    WARN = ("⚠️", Channel.WARNING, "yellow")
    BUG = ("🐛", Channel.WARNING, "magenta")
    ERROR = ("💥", Channel.FATAL, "bold red")
    UNDEFINED = ("❓", Channel.WARNING, "dim yellow")

    def __init__(self, icon: str, channel: Channel, style: str):
        self.icon = icon
        self.channel = channel
        self.style = style

    @classmethod
    def parse(cls, value: Any) -> Optional["Severity"]:
        """
        Resolve a severity from a member or a case-insensitive name.

        Args:
            value: A Severity, or a string such as "warn" or "ERROR"

        Returns:
            The matching Severity, or None if value names no severity
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.__members__.get(value.upper())
        return None

    @classmethod
    def is_reserved(cls, name: Any) -> bool:
        """Check whether name collides with a severity name."""
        return isinstance(name, str) and name.upper() in cls.__members__

    def __str__(self) -> str:
        return self.name
