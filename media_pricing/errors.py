"""Exceptions raised by media-pricing."""


class MediaPricingError(Exception):
    """Base class for all media-pricing errors."""


class InvalidConfiguration(MediaPricingError, ValueError):
    """Raised when a pricing object is constructed from invalid parts.

    Examples are a service built without a content item, a non-numeric
    price, or a user subscribed to something that is not a service.
    """
