"""Pytest configuration and shared fixtures for media-pricing tests."""

import shutil
from pathlib import Path
from typing import Any, Iterator, Optional

import pytest

from media_pricing.core.visitors import TypeCheckFinding
from media_pricing.model import DownloadService, PremiumContent, StandardContent, StreamingService


class TypeCheckTestBase:
    """Base class for type-check finder tests with automatic fixture management.

    Usage:
        class TestFindTypeChecks(TypeCheckTestBase):
            fixture_category = "type_checks"

            def test_legacy_pricing(self):
                findings = self.find()
                assert [f.line for f in findings] == [9, 14]

    Convention:
        - Test method name (minus 'test_' prefix) maps to fixture directory name
        - Fixture directory contains input.py
        - Example: test_legacy_pricing() -> fixtures/type_checks/legacy_pricing/input.py
    """

    fixture_category: Optional[str] = None  # Must be set in subclass

    @pytest.fixture(autouse=True)
    def _setup_fixture(self, tmp_path: Path, request: pytest.FixtureRequest) -> Iterator[None]:
        """Copy the fixture's input.py into tmp_path before each test.

        Creates:
            self.tmp_path: Temporary directory for this test
            self.test_file: Path to input.py (copied to tmp_path), or None
        """
        self.tmp_path = tmp_path

        test_name = request.function.__name__
        fixture_name = test_name[5:] if test_name.startswith("test_") else test_name

        if self.fixture_category is None:
            raise ValueError(f"{self.__class__.__name__} must set fixture_category class attribute")

        input_file = Path(__file__).parent / "fixtures" / self.fixture_category / fixture_name / "input.py"

        self.test_file: Optional[Path] = None
        if input_file.exists():
            self.test_file = tmp_path / "input.py"
            shutil.copy(input_file, self.test_file)

        yield

    def find(self, **params: Any) -> list[TypeCheckFinding]:
        """Run find-type-checks on the fixture and return its findings.

        Args:
            **params: Parameters to pass to the command

        Raises:
            RuntimeError: If no fixture was loaded for this test
        """
        # Import here to avoid registering commands during test collection
        from media_pricing.commands.registry import discover_and_register_commands, run_command

        if self.test_file is None:
            raise RuntimeError("No fixture loaded. Ensure fixture directory exists for this test.")

        discover_and_register_commands()
        original = self.test_file.read_text()
        command = run_command("find-type-checks", self.test_file, **params)
        assert self.test_file.read_text() == original, "find-type-checks must not modify the file"
        return command.findings  # type: ignore[attr-defined]


@pytest.fixture
def premium_content() -> PremiumContent:
    """Premium content streamed at 10, downloaded at 8, with a fee of 2."""
    return PremiumContent(streaming_price=10, download_price=8, additional_fee=2)


@pytest.fixture
def standard_content() -> StandardContent:
    """Standard content streamed at 5, downloaded at 3."""
    return StandardContent(streaming_price=5, download_price=3)


@pytest.fixture
def mixed_services(
    premium_content: PremiumContent, standard_content: StandardContent
) -> list:
    """One service of each kind for each content."""
    return [
        StreamingService(premium_content),
        DownloadService(premium_content),
        StreamingService(standard_content),
        DownloadService(standard_content),
    ]
