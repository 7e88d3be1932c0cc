from announcer.core.severity import Channel, Severity


def test_parse_is_case_insensitive():
    assert Severity.parse("warn") is Severity.WARN
    assert Severity.parse("Error") is Severity.ERROR
    assert Severity.parse(Severity.BUG) is Severity.BUG


def test_parse_rejects_unknown_values():
    assert Severity.parse("loud") is None
    assert Severity.parse(3) is None
    assert Severity.parse(None) is None


def test_reserved_names():
    for severity in Severity:
        assert Severity.is_reserved(severity.name.lower())
    assert not Severity.is_reserved("greet")
    assert not Severity.is_reserved(42)


def test_channels():
    assert Severity.ACTION.channel is Channel.LINE
    assert Severity.ALERT.channel is Channel.LINE
    assert Severity.WARN.channel is Channel.WARNING
    assert Severity.BUG.channel is Channel.WARNING
    assert Severity.UNDEFINED.channel is Channel.WARNING
    assert Severity.ERROR.channel is Channel.FATAL


def test_default_icons():
    assert Severity.ACTION.icon == "👍"
    assert all(isinstance(severity.icon, str) and severity.icon for severity in Severity)
    assert str(Severity.ALERT) == "ALERT"
