"""Pricing object model: contents, services and the registered user."""

from media_pricing.model.content import MultimediaContent, PremiumContent, StandardContent
from media_pricing.model.service import DownloadService, Service, StreamingService
from media_pricing.model.user import RegisteredUser

__all__ = [
    "MultimediaContent",
    "StandardContent",
    "PremiumContent",
    "Service",
    "StreamingService",
    "DownloadService",
    "RegisteredUser",
]
