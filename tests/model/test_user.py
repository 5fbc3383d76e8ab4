"""
Tests for the registered user.

The user total is the sum of the prices of its services.
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from media_pricing.errors import InvalidConfiguration
from media_pricing.model import (
    DownloadService,
    PremiumContent,
    RegisteredUser,
    StandardContent,
    StreamingService,
)


class TestGetTotal:
    """Tests for RegisteredUser.get_total()."""

    def test_streaming_and_download(self, premium_content: PremiumContent) -> None:
        """Streaming (12) and downloading (10) the same premium content totals 22."""
        user = RegisteredUser([StreamingService(premium_content), DownloadService(premium_content)])
        assert user.get_total() == 22

    def test_no_services(self) -> None:
        """A user without services totals 0."""
        assert RegisteredUser([]).get_total() == 0
        assert RegisteredUser().get_total() == 0

    def test_total_is_sum_of_service_prices(self, mixed_services: list) -> None:
        """The total equals the sum of each service's computed price."""
        user = RegisteredUser(mixed_services)
        assert user.get_total() == sum(s.compute_price() for s in mixed_services)
        assert user.get_total() == 12 + 10 + 5 + 3

    def test_order_does_not_matter(self, mixed_services: list) -> None:
        """Reordering the services does not change the total."""
        assert (
            RegisteredUser(mixed_services).get_total()
            == RegisteredUser(reversed(mixed_services)).get_total()
        )

    def test_repeated_calls_agree(self, mixed_services: list) -> None:
        """get_total() returns the same value every time."""
        user = RegisteredUser(mixed_services)
        assert user.get_total() == user.get_total() == 30

    def test_accepts_any_iterable(self, premium_content: PremiumContent) -> None:
        """Services may come from a generator and are stored as a tuple."""
        user = RegisteredUser(StreamingService(premium_content) for _ in range(2))
        assert isinstance(user.services, tuple)
        assert user.get_total() == 24


class TestUserValidation:
    """Tests for construction-time checks on the user."""

    def test_non_service_rejected(self, premium_content: PremiumContent) -> None:
        """Items that are not services raise InvalidConfiguration with their index."""
        with pytest.raises(InvalidConfiguration) as exc_info:
            RegisteredUser([StreamingService(premium_content), premium_content])

        assert "services[1]" in str(exc_info.value)

    def test_later_changes_to_input_list_are_ignored(self, premium_content: PremiumContent) -> None:
        """The user keeps its own copy of the service list."""
        services = [StreamingService(premium_content)]
        user = RegisteredUser(services)
        services.append(DownloadService(premium_content))
        assert user.get_total() == 12


class TestUserPriceFamilies:
    """Tests that a user's service prices can always be summed."""

    def test_decimal_and_float_contents_rejected(self) -> None:
        """Services over Decimal and float contents cannot share a user."""
        services = [
            StreamingService(StandardContent(Decimal("1"), 1)),
            StreamingService(StandardContent(0.5, 1)),
        ]

        with pytest.raises(InvalidConfiguration) as exc_info:
            RegisteredUser(services)

        assert "services[0] (Decimal)" in str(exc_info.value)
        assert "services[1] (float/Fraction)" in str(exc_info.value)

    def test_decimal_and_fraction_contents_rejected(self) -> None:
        """Services over Decimal and Fraction contents cannot share a user."""
        with pytest.raises(InvalidConfiguration):
            RegisteredUser(
                [
                    DownloadService(PremiumContent(0, Decimal("2"), 1)),
                    DownloadService(PremiumContent(0, Fraction(1, 3), 0)),
                ]
            )

    def test_integer_contents_mix_with_decimal(self) -> None:
        """Integer-priced contents sum with Decimal-priced ones."""
        services = [
            StreamingService(StandardContent(Decimal("1.25"), 1)),
            StreamingService(PremiumContent(10, 8, 2)),
        ]
        user = RegisteredUser(services)

        assert user.get_total() == Decimal("13.25")
        assert user.get_total() == sum(s.compute_price() for s in services)

    def test_float_and_fraction_contents_sum(self) -> None:
        """float and Fraction prices add without error."""
        services = [
            StreamingService(StandardContent(0.5, 1)),
            StreamingService(StandardContent(Fraction(1, 4), 1)),
        ]

        assert RegisteredUser(services).get_total() == 0.75
