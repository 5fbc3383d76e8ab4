"""Multimedia content and its additional-fee adjustment."""

from dataclasses import dataclass
from decimal import Decimal
from numbers import Integral, Real
from typing import Any, Optional, Union

from media_pricing.errors import InvalidConfiguration

Price = Union[int, float, Decimal, Real]

# Decimal does not add with float or Fraction; integers add with both.
DECIMAL_FAMILY = "Decimal"
BINARY_FAMILY = "float/Fraction"


def require_price(owner: str, field_name: str, value: Any) -> None:
    """Check that a price attribute holds a real number.

    Negative prices are allowed; booleans are not numbers here.

    Raises:
        InvalidConfiguration: If the value is not a real number
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise InvalidConfiguration(
            f"{owner}.{field_name} must be a number, got {type(value).__name__}: {value!r}"
        )


def price_family(value: Price) -> Optional[str]:
    """Return the numeric family of a price, or None for integers."""
    if isinstance(value, Decimal):
        return DECIMAL_FAMILY
    if isinstance(value, Integral):
        return None
    return BINARY_FAMILY


def require_one_family(owner: str, prices: dict[str, Price]) -> Optional[str]:
    """Check that prices can be added together.

    Args:
        owner: Name used in the error message
        prices: Price values keyed by a label

    Returns:
        The shared family, or None when every price is an integer

    Raises:
        InvalidConfiguration: If Decimal prices are mixed with float or Fraction prices
    """
    families = {label: price_family(value) for label, value in prices.items()}
    found = sorted({family for family in families.values() if family})
    if len(found) > 1:
        labels = ", ".join(f"{label} ({family})" for label, family in families.items() if family)
        raise InvalidConfiguration(
            f"{owner} mixes Decimal prices with float or Fraction prices: {labels}"
        )
    return found[0] if found else None


@dataclass(frozen=True)
class MultimediaContent:
    """A priced item with a base price per access mode.

    The base content charges nothing on top of the base price.
    All prices of one content must belong to one numeric family: Decimal
    on one side, float and Fraction on the other. Integers mix with either.

    Attributes:
        streaming_price: Base price when the content is streamed
        download_price: Base price when the content is downloaded
    """

    streaming_price: Price = 0
    download_price: Price = 0

    def __post_init__(self) -> None:
        owner = type(self).__name__
        for field_name, value in self.prices().items():
            require_price(owner, field_name, value)
        require_one_family(owner, self.prices())

    def prices(self) -> dict[str, Price]:
        """Return every price attribute of this content by name."""
        return {"streaming_price": self.streaming_price, "download_price": self.download_price}

    def adjust_additional_fees(self, base_price: Price) -> Price:
        """Return the price for this content given a base price.

        Args:
            base_price: Unadjusted price for the chosen access mode

        Returns:
            The base price, unchanged
        """
        return base_price


@dataclass(frozen=True)
class StandardContent(MultimediaContent):
    """Regular content: base prices only, no surcharge."""


@dataclass(frozen=True)
class PremiumContent(MultimediaContent):
    """Content that adds a flat surcharge to whichever base price is used."""

    additional_fee: Price = 0

    def prices(self) -> dict[str, Price]:
        return {**super().prices(), "additional_fee": self.additional_fee}

    def adjust_additional_fees(self, base_price: Price) -> Price:
        return base_price + self.additional_fee
