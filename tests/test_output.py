from io import StringIO

import pytest
from rich.console import Console

from announcer.core.exceptions import FatalActionError
from announcer.core.output import ConsoleOutput, format_prefix, render_message


def make_console():
    return Console(file=StringIO(), width=120, color_system=None)


def test_format_prefix():
    assert format_prefix("👍", "GREET") == "👍 GREET:"
    assert format_prefix("❓", 42) == "❓ 42:"


def test_render_message_joins_with_spaces():
    assert render_message("💥 ERROR:", ("x", 2, None)) == "💥 ERROR: x 2 None"
    assert render_message("👍 QUIET:", ()) == "👍 QUIET:"


def test_lines_and_warnings_use_separate_consoles():
    out, err = make_console(), make_console()
    output = ConsoleOutput(console=out, err_console=err)

    output.write_line("👍 GREET:", "hi Sam", style="green")
    output.write_warning("⚠️ WARN:", "[not markup]")

    assert out.file.getvalue() == "👍 GREET: hi Sam\n"
    assert err.file.getvalue() == "⚠️ WARN: [not markup]\n"


def test_warnings_can_share_stdout_console():
    out = make_console()
    output = ConsoleOutput(console=out, warnings_to_stderr=False)

    output.write_warning("🐛 BUG:", "leak")

    assert output.err_console is out
    assert "🐛 BUG: leak" in out.file.getvalue()


def test_raise_fatal():
    output = ConsoleOutput(console=make_console(), err_console=make_console())

    with pytest.raises(FatalActionError) as excinfo:
        output.raise_fatal("💥 ERROR: x y")

    assert excinfo.value.message == "💥 ERROR: x y"


def test_results_are_printed_verbatim():
    out = make_console()
    output = ConsoleOutput(console=out, err_console=out)

    output.write_line("👍 GREET:", "hi :warning: :smile:")
    output.write_warning("⚠️ WARN:", ":fire:")

    assert out.file.getvalue() == "👍 GREET: hi :warning: :smile:\n⚠️ WARN: :fire:\n"


def test_long_results_are_not_wrapped():
    out = Console(file=StringIO(), width=80, color_system=None)
    output = ConsoleOutput(console=out, err_console=out)

    output.write_line("👍 GREET:", "x" * 200)

    assert out.file.getvalue() == "👍 GREET: " + "x" * 200 + "\n"
