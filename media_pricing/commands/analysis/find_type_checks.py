"""Find Type Checks command."""

from media_pricing.commands.base import BaseCommand
from media_pricing.commands.registry import register_command
from media_pricing.core.visitors import TypeCheckFinding, collect_type_checks


class FindTypeChecksCommand(BaseCommand):
    """Report if/elif chains that pick behaviour from the runtime type of a value.

    Such chains are what replacing a conditional with polymorphism removes:
    every new type forces another branch into the same method.

    **Example:**
        for service in self.services:
            if isinstance(service, StreamingService):
                total += service.content.streaming_price
            elif isinstance(service, DownloadService):
                total += service.content.download_price

    is reported once, at the ``if`` line, as checking ``service`` against
    ``StreamingService`` and ``DownloadService``.

    Params:
        min_branches: Fewest type-checking branches a chain needs (default 1)
    """

    name = "find-type-checks"

    def validate(self) -> None:
        """Validate the min_branches parameter.

        Raises:
            ValueError: If min_branches is not a positive integer
        """
        min_branches = self.params.get("min_branches", 1)
        if isinstance(min_branches, bool) or not isinstance(min_branches, int):
            raise ValueError(f"min_branches must be an integer, got {min_branches!r}")
        if min_branches < 1:
            raise ValueError(f"min_branches must be at least 1, got {min_branches}")

    def execute(self) -> None:
        """Scan the file and store the findings on self.findings.

        Raises:
            ValueError: If the file is missing or cannot be parsed
        """
        self.findings: list[TypeCheckFinding] = collect_type_checks(
            self.parse_source(), min_branches=self.params.get("min_branches", 1)
        )


register_command(FindTypeChecksCommand)
