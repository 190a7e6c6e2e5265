"""Holding domain model."""

from dataclasses import dataclass, field
from typing import Optional

from stockboard.domain.models.enums import Currency


@dataclass(frozen=True)
class Holding:
    """
    A position entered by the user: symbol, quantity, currency and optional sector.

    Owned by the presentation layer; the backend only reads it.
    """

    id: str
    symbol: str
    quantity: float
    currency: Currency = Currency.USD
    user_sector: Optional[str] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.currency, str):
            object.__setattr__(self, "currency", Currency(self.currency))
