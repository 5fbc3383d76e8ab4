"""The registered user and the total of its subscriptions."""

import logging
from dataclasses import dataclass
from typing import Iterable

from media_pricing.errors import InvalidConfiguration
from media_pricing.model.content import Price, require_one_family
from media_pricing.model.service import Service

logger = logging.getLogger(__name__)


@dataclass(frozen=True, init=False)
class RegisteredUser:
    """A user subscribed to zero or more services.

    Example:
        movie = PremiumContent(streaming_price=10, download_price=8, additional_fee=2)
        user = RegisteredUser([StreamingService(movie), DownloadService(movie)])
        user.get_total()  # 22
    """

    services: tuple[Service, ...]

    def __init__(self, services: Iterable[Service] = ()) -> None:
        """Initialize the user.

        Args:
            services: Services the user subscribes to

        Raises:
            InvalidConfiguration: If any item is not a Service, or if the
                contents mix Decimal prices with float or Fraction prices
        """
        services = tuple(services)
        for index, service in enumerate(services):
            if not isinstance(service, Service):
                raise InvalidConfiguration(
                    f"RegisteredUser.services[{index}] must be a Service, "
                    f"got {type(service).__name__}"
                )
        require_one_family(
            "RegisteredUser",
            {
                f"services[{index}]": service.compute_price()
                for index, service in enumerate(services)
            },
        )
        object.__setattr__(self, "services", services)

    def get_total(self) -> Price:
        """Return the sum of the prices of every subscribed service.

        A user without services totals 0.
        """
        total = sum((service.compute_price() for service in self.services), 0)
        logger.debug("Total for %d service(s): %s", len(self.services), total)
        return total
