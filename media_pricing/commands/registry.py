"""Command registry for dynamic dispatch of analysis commands."""

import importlib
import logging
import pkgutil
from pathlib import Path
from typing import Any, Dict, Type

from media_pricing.commands.base import BaseCommand

logger = logging.getLogger(__name__)

_registry: Dict[str, Type[BaseCommand]] = {}


def register_command(command_class: Type[BaseCommand]) -> None:
    """Register a command class.

    Args:
        command_class: The command class to register

    Raises:
        ValueError: If command_class doesn't have a name attribute
    """
    if not hasattr(command_class, "name"):
        raise ValueError(f"Command class {command_class.__name__} must have a 'name' attribute")
    _registry[command_class.name] = command_class
    logger.debug("Registered command %s", command_class.name)


def get_command(name: str) -> Type[BaseCommand]:
    """Get a command class by name.

    Args:
        name: The name of the command

    Returns:
        The command class

    Raises:
        ValueError: If command is not registered
    """
    if name not in _registry:
        raise ValueError(f"Unknown command: {name}")
    return _registry[name]


def discover_and_register_commands() -> None:
    """Import every command module below the commands package.

    Each module calls register_command() at import time, so importing it is
    enough to make the command available by name.
    """
    commands_dir = Path(__file__).parent

    for category_dir in commands_dir.iterdir():
        if category_dir.is_dir() and not category_dir.name.startswith("_"):
            package_name = f"media_pricing.commands.{category_dir.name}"
            for module_info in pkgutil.iter_modules([str(category_dir)]):
                if not module_info.name.startswith("_"):
                    importlib.import_module(f"{package_name}.{module_info.name}")


def run_command(name: str, file_path: Path, **params: Any) -> BaseCommand:
    """Validate and execute a command using the registry.

    Args:
        name: Name of the command to run
        file_path: Path to the file to analyze
        **params: Additional parameters for the command

    Returns:
        The executed command, holding its results

    Raises:
        ValueError: If the command is unknown or parameters are invalid
    """
    command_class = get_command(name)
    command = command_class(file_path, **params)
    command.validate()
    logger.debug("Running %s on %s", name, file_path)
    command.execute()
    return command
