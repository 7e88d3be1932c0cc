"""
Action registry for loading configured action functions.

Configured actions name their method as an import target of the form
"package.module:function". This module imports those targets and turns
each configuration entry into an Action descriptor ready for registration.
"""

import importlib
import logging
from typing import Any, Callable, Dict, Mapping, Optional

from ..core.config_models import ActionConfig
from ..core.exceptions import ActionImportError
from ..core.logging import get_logger
from ..core.models import Action


def import_target(target: str) -> Callable[..., Any]:
    """
    Import the callable named by a "module:function" target.

    Dotted attribute paths after the colon are followed, so
    "pkg.mod:Class.method" resolves Class first, then method.

    Raises:
        ActionImportError: If the module or attribute cannot be found,
            or the attribute is not callable
    """
    module_path, _, attr_path = target.partition(":")
    if not module_path or not attr_path:
        raise ActionImportError(f"Invalid action target: {target!r}")

    try:
        obj: Any = importlib.import_module(module_path)
    except ImportError as e:
        raise ActionImportError(
            f"Could not import action module {module_path}. Error: {e}"
        ) from e

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise ActionImportError(
                f"Module {module_path} has no attribute {attr_path}"
            ) from e

    if not callable(obj):
        raise ActionImportError(f"Action target {target} is not callable")
    return obj


def load_action_registry(
    entries: Mapping[str, ActionConfig],
    logger: Optional[logging.Logger] = None,
    strict: bool = False,
) -> Dict[str, Action]:
    """
    Imports the method of every configured action.

    For example, an entry `greet = {target = "myapp.hello:greet"}` is loaded
    as an Action named 'greet' whose method is `myapp.hello.greet`.

    Args:
        entries: Action configurations keyed by action name
        logger: Optional logger for status messages
        strict: Raise instead of skipping targets that fail to import

    Returns:
        dict: A dictionary mapping action names to Action descriptors.

    Raises:
        ActionImportError: If strict is set and a target cannot be imported
    """
    logger = logger or get_logger()
    action_registry: Dict[str, Action] = {}

    for name, entry in entries.items():
        try:
            method = import_target(entry.target)
        except ActionImportError as e:
            if strict:
                raise
            logger.warning(f"Skipping action '{name}': {e}")
            continue

        action_registry[name] = Action(
            method=method,
            severity=entry.severity,
            icon=entry.icon,
            suppress_overwrite_warning=entry.suppress_overwrite_warning,
        )
        logger.debug(f"Discovered action: {name} -> {entry.target}")

    return action_registry
