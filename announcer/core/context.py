"""
Application context for managing shared state and dependencies.
"""

from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..actions.dispatcher import Announcer
from ..actions.registry import load_action_registry
from .config import DEFAULT_CONFIG_NAME, load_config
from .config_models import AnnouncerConfig
from .exceptions import ConfigurationError, FatalActionError
from .logging import setup_logging
from .output import ConsoleOutput, OutputPrimitives


class AppContext:
    """
    Central application context that owns the typed configuration, the
    logger and an Announcer loaded with the configured actions.
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        output: Optional[OutputPrimitives] = None,
    ):
        """
        Initialize the application context.

        Without an explicit config_path, announcer.toml is used when present
        and defaults apply otherwise.

        Args:
            config_path: Optional path to configuration file
            output: Optional output primitives (defaults to configured console output)

        Raises:
            ConfigurationError: If configuration cannot be loaded or a
                configured action is rejected
        """
        self.config_path = config_path or Path(DEFAULT_CONFIG_NAME)

        try:
            if config_path is None and not self.config_path.is_file():
                self.config = AnnouncerConfig()
            else:
                self.config = load_config(self.config_path)
        except (FileNotFoundError, ValidationError, ValueError) as e:
            raise ConfigurationError(str(e)) from e

        log_file = None
        if self.config.logging.enable_file_logging:
            log_file = self.config.logging.log_file or (
                Path.home() / ".announcer" / "announcer.log"
            )

        self.logger = setup_logging(level=self.config.logging.level, log_file=log_file)

        if output is None:
            output = ConsoleOutput(
                color=self.config.output.color,
                warnings_to_stderr=self.config.output.warnings_to_stderr,
            )
        self.announcer = Announcer(output=output, icons=self.config.icons)
        try:
            self.announcer.load_actions(
                load_action_registry(self.config.actions, self.logger)
            )
        except FatalActionError as e:
            raise ConfigurationError(e.message) from e

        self.logger.debug("Configuration loaded successfully")
