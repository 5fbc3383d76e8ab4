"""Base class for all source analysis commands."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import libcst as cst


class BaseCommand(ABC):
    """Base class for all commands that work on a Python source file."""

    name: str  # e.g., "find-type-checks"

    def __init__(self, file_path: Path, **params: Any):
        """Initialize the command.

        Args:
            file_path: Path to the file to analyze
            **params: Additional parameters for the command
        """
        self.file_path = Path(file_path)
        self.params = params

    @abstractmethod
    def execute(self) -> None:
        """Run the command and store its results on the instance.

        Raises:
            ValueError: If the command cannot be applied
        """
        pass

    @abstractmethod
    def validate(self) -> None:
        """Validate parameters before execution.

        Raises:
            ValueError: If parameters are invalid
        """
        pass

    def parse_source(self) -> cst.Module:
        """Read and parse the command's file with libCST.

        Raises:
            ValueError: If the file is missing or is not valid Python
        """
        if not self.file_path.is_file():
            raise ValueError(f"File does not exist: {self.file_path}")
        try:
            return cst.parse_module(self.file_path.read_text())
        except cst.ParserSyntaxError as e:
            raise ValueError(f"Cannot parse {self.file_path}: {e.message}") from e
