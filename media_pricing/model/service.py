"""Subscription services that price a content item."""

from dataclasses import dataclass

from media_pricing.errors import InvalidConfiguration
from media_pricing.model.content import MultimediaContent, Price


@dataclass(frozen=True)
class Service:
    """A subscription channel priced from one content item.

    The service refers to its content but does not own it; the same content
    can back several services. Subclasses choose which base price of the
    content applies by overriding base_price().

    Attributes:
        content: The content this service gives access to
    """

    content: MultimediaContent = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not isinstance(self.content, MultimediaContent):
            raise InvalidConfiguration(
                f"{type(self).__name__} requires a MultimediaContent, "
                f"got {type(self.content).__name__}"
            )

    def base_price(self) -> Price:
        """Return the unadjusted price this service charges for its content."""
        return 0

    def compute_price(self) -> Price:
        """Return the price of this service, fees included."""
        return self.content.adjust_additional_fees(self.base_price())


@dataclass(frozen=True)
class StreamingService(Service):
    """Service priced from the content's streaming price."""

    def base_price(self) -> Price:
        return self.content.streaming_price


@dataclass(frozen=True)
class DownloadService(Service):
    """Service priced from the content's download price."""

    def base_price(self) -> Price:
        return self.content.download_price
