"""
Pydantic configuration models for the announcer.

This module defines strongly-typed configuration models using Pydantic v2,
providing validation, safety, and self-documentation for all configuration sections.
"""

from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator

from .severity import Severity


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = "WARNING"
    log_file: Optional[Path] = None
    enable_file_logging: bool = False

    def expand(self):
        """Expand user paths to absolute paths."""
        if self.log_file:
            self.log_file = self.log_file.expanduser()
        return self


class OutputConfig(BaseModel):
    """Console output configuration."""
    color: bool = True
    warnings_to_stderr: bool = True


class ActionConfig(BaseModel):
    """An action whose method is imported from "module:function"."""
    target: str = Field(..., min_length=1)
    severity: Optional[str] = None
    icon: Optional[str] = None
    suppress_overwrite_warning: bool = False

    @field_validator("target")
    @classmethod
    def check_target(cls, value: str) -> str:
        module, _, attr = value.partition(":")
        if not module or not attr:
            raise ValueError(f"target must look like 'package.module:function', got {value!r}")
        return value

    @field_validator("severity")
    @classmethod
    def check_severity(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        severity = Severity.parse(value)
        if severity is None:
            raise ValueError(f"unknown severity {value!r}")
        return severity.name


class AnnouncerConfig(BaseModel):
    """Root configuration model."""
    logging: LoggingConfig = LoggingConfig()
    output: OutputConfig = OutputConfig()
    icons: Dict[str, str] = {}
    actions: Dict[str, ActionConfig] = {}

    @field_validator("icons")
    @classmethod
    def check_icons(cls, value: Dict[str, str]) -> Dict[str, str]:
        icons = {}
        for key, icon in value.items():
            severity = Severity.parse(key)
            if severity is None:
                raise ValueError(f"unknown severity {key!r} in icons")
            icons[severity.name] = icon
        return icons

    @field_validator("actions")
    @classmethod
    def check_action_names(cls, value: Dict[str, ActionConfig]) -> Dict[str, ActionConfig]:
        for name in value:
            if Severity.is_reserved(name):
                raise ValueError(f"action name {name!r} is a reserved severity name")
        return value
