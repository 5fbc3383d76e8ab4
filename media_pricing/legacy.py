"""Pricing as it was written before services and contents priced themselves.

LegacyRegisteredUser computes the same total as RegisteredUser, but it does
so by inspecting the concrete type of every service and content. Each new
kind of service or content means editing get_total(). It is kept next to the
polymorphic model so the two can be compared.
"""

import logging
from typing import Iterable

from media_pricing.model.content import PremiumContent, Price
from media_pricing.model.service import DownloadService, Service, StreamingService

logger = logging.getLogger(__name__)


class LegacyRegisteredUser:
    """Registered user whose total is computed with type checks."""

    def __init__(self, services: Iterable[Service] = ()) -> None:
        self.services = tuple(services)

    def get_total(self) -> Price:
        total: Price = 0
        for service in self.services:
            content = service.content
            if isinstance(service, StreamingService):
                total += content.streaming_price
            elif isinstance(service, DownloadService):
                total += content.download_price
            else:
                logger.debug("Unpriced service type: %s", type(service).__name__)
                continue

            if isinstance(content, PremiumContent):
                total += content.additional_fee
        return total
