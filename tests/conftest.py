"""
Shared fixtures: an Announcer wired to recording output primitives.
"""

import pytest

from announcer.actions.dispatcher import Announcer
from announcer.core.exceptions import FatalActionError


class RecordingOutput:
    """Output primitives that remember what was written instead of printing."""

    def __init__(self):
        self.lines = []
        self.warnings = []
        self.fatals = []

    def write_line(self, text, *values, style=None):
        self.lines.append((text, values))

    def write_warning(self, text, *values, style=None):
        self.warnings.append((text, values))

    def raise_fatal(self, text):
        self.fatals.append(text)
        raise FatalActionError(text)


@pytest.fixture
def output():
    return RecordingOutput()


@pytest.fixture
def announcer(output):
    return Announcer(output=output)
