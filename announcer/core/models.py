"""
Data models for registered actions and the notices the announcer emits
about them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union

from .severity import Severity


def normalize_name(name: str) -> str:
    """Fold an action name to its case-insensitive lookup form."""
    return name.upper()


@dataclass
class Action:
    """A named unit of work announced under a severity."""

    method: Callable[..., Any]
    severity: Optional[Union[Severity, str]] = None
    icon: Optional[str] = None
    suppress_overwrite_warning: bool = False
    name: str = ""

    @property
    def effective_severity(self) -> Severity:
        """Severity the action is announced under (ACTION when unset)."""
        return Severity.parse(self.severity) or Severity.ACTION

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Action":
        """Create an Action from a mapping descriptor."""
        suppress = data.get(
            "suppress_overwrite_warning", data.get("suppressOverwriteWarning", False)
        )
        return cls(
            method=data.get("method"),
            severity=data.get("severity"),
            icon=data.get("icon"),
            suppress_overwrite_warning=bool(suppress),
            name=data.get("name", ""),
        )


class Notice(str, Enum):
    """Messages the announcer reports about actions, keyed by notice name."""

    ACTION_OVERWRITTEN = 'Action "{name}" was overwritten!'
    ACTION_FAILED = 'Action "{name}" failed to run!'
    INVALID_NAME = "Action name {name!r} is not a string!"
    RESERVED_NAME = 'Action "{name}" uses a reserved severity name!'
    INVALID_ACTION = 'Action "{name}" must be an Action or a mapping!'
    INVALID_METHOD = 'Action "{name}" has no callable method!'
    INVALID_SEVERITY = 'Action "{name}" has an unknown severity {severity!r}!'
    INVALID_ICON = 'Action "{name}" icon must be a string!'

    def render(self, **kwargs: Any) -> str:
        return self.value.format(**kwargs)
