"""
Tests for the AppContext class.
"""

import logging
from unittest.mock import patch

import pytest

from announcer.actions.dispatcher import Announcer
from announcer.core.config_models import AnnouncerConfig
from announcer.core.context import AppContext
from announcer.core.exceptions import ConfigurationError


class TestAppContext:
    """Test cases for AppContext functionality."""

    @pytest.fixture
    def temp_config_file(self, tmp_path):
        """Create a temporary config file for testing."""
        config_path = tmp_path / "announcer.toml"
        config_path.write_text("""
[logging]
level = "INFO"

[icons]
action = "✅"

[actions.base]
target = "os.path:basename"

[actions.missing]
target = "os.path:does_not_exist"
        """)
        return config_path

    def test_app_context_initialization(self, temp_config_file, output):
        """Test successful AppContext initialization."""
        ctx = AppContext(temp_config_file, output=output)

        assert isinstance(ctx.config, AnnouncerConfig)
        assert isinstance(ctx.announcer, Announcer)
        assert ctx.logger.name == "announcer"
        assert ctx.logger.level == logging.INFO
        assert ctx.config_path == temp_config_file

    def test_configured_actions_are_loaded(self, temp_config_file, output):
        ctx = AppContext(temp_config_file, output=output)

        assert ctx.announcer.actions.names() == ["BASE"]

        ctx.announcer.run("base", "/tmp/notes.txt")
        assert output.lines == [("✅ BASE:", ("notes.txt",))]

    def test_app_context_missing_config_file(self, tmp_path):
        """Test error handling when an explicit config file doesn't exist."""
        with pytest.raises(ConfigurationError):
            AppContext(tmp_path / "nonexistent.toml")

    def test_app_context_invalid_config(self, tmp_path):
        config_path = tmp_path / "announcer.toml"
        config_path.write_text('[icons]\nloud = "📣"\n')

        with pytest.raises(ConfigurationError):
            AppContext(config_path)

    def test_defaults_without_config_file(self, tmp_path, monkeypatch, output):
        monkeypatch.chdir(tmp_path)

        ctx = AppContext(output=output)

        assert ctx.config == AnnouncerConfig()
        assert len(ctx.announcer.actions) == 0

    def test_file_logging(self, tmp_path, output):
        log_file = tmp_path / "logs" / "announcer.log"
        config_path = tmp_path / "announcer.toml"
        config_path.write_text(f"""
[logging]
enable_file_logging = true
log_file = "{log_file.as_posix()}"
""")

        with patch("announcer.core.context.setup_logging") as mock_setup_logging:
            AppContext(config_path, output=output)

        mock_setup_logging.assert_called_once_with(level="WARNING", log_file=log_file)

    def test_reserved_action_name_is_a_configuration_error(self, tmp_path, output):
        config_path = tmp_path / "announcer.toml"
        config_path.write_text('[actions.warn]\ntarget = "os:getcwd"\n')

        with pytest.raises(ConfigurationError, match="reserved"):
            AppContext(config_path, output=output)

    def test_rejected_registration_is_a_configuration_error(self, temp_config_file, output):
        with patch(
            "announcer.core.context.load_action_registry",
            return_value={"broken": {"method": "not callable"}},
        ):
            with pytest.raises(ConfigurationError, match="INVALID_METHOD"):
                AppContext(temp_config_file, output=output)
