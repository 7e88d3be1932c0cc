"""
Output primitives used by the dispatcher.

The dispatcher never prints directly. It formats a prefix and a result
sequence and hands them to one of three primitives: a normal line, a
warning line, or a fatal error. ConsoleOutput implements them with Rich
consoles; tests substitute recording stubs.
"""

from typing import Any, Optional, Protocol, Sequence

from rich.console import Console

from .exceptions import FatalActionError


def format_prefix(icon: str, name: Any) -> str:
    """Build the "<icon> <NAME>:" prefix of an announced message."""
    return f"{icon} {name}:"


def render_message(text: str, values: Sequence[Any]) -> str:
    """Join a prefix and its values with single spaces, print-style."""
    return " ".join([text, *(str(value) for value in values)])


class OutputPrimitives(Protocol):
    """The three console primitives the dispatcher writes through."""

    def write_line(self, text: str, *values: Any, style: Optional[str] = None) -> None:
        ...

    def write_warning(
        self, text: str, *values: Any, style: Optional[str] = None
    ) -> None:
        ...

    def raise_fatal(self, text: str) -> None:
        ...


class ConsoleOutput:
    """Rich-backed output: lines to stdout, warnings to stderr, errors raised."""

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        color: bool = True,
        warnings_to_stderr: bool = True,
    ):
        """
        Initialize the console output.

        Args:
            console: Console for normal lines (defaults to stdout)
            err_console: Console for warnings (defaults to stderr)
            color: Disable to strip styles from everything written
            warnings_to_stderr: When False, warnings share the stdout console
        """
        self.console = console or Console(no_color=not color)
        if err_console is None:
            err_console = (
                Console(stderr=True, no_color=not color)
                if warnings_to_stderr
                else self.console
            )
        self.err_console = err_console

    def write_line(self, text: str, *values: Any, style: Optional[str] = None) -> None:
        self.console.print(
            render_message(text, values),
            style=style,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def write_warning(
        self, text: str, *values: Any, style: Optional[str] = None
    ) -> None:
        self.err_console.print(
            render_message(text, values),
            style=style,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    def raise_fatal(self, text: str) -> None:
        raise FatalActionError(text)
