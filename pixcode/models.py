"""Domain input for the Pix payload encoder."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

DEFAULT_TRANSACTION_ID = "***"


def to_decimal(amount: Decimal | float | int | str | None) -> Decimal:
    """Normalize an amount; ``None`` means zero and floats go through their shortest repr."""

    if amount is None:
        return Decimal(0)
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, float):
        return Decimal(repr(amount))
    return Decimal(amount)


@dataclass(frozen=True, slots=True)
class EncodingRequest:
    # Pix key: CPF/CNPJ, email, phone or random key. Only presence is checked.
    key: str
    name: str = ""
    city: str = ""
    amount: Decimal | float | int | str | None = Decimal(0)  # always a Decimal after __post_init__
    description: str = ""
    transaction_id: str = DEFAULT_TRANSACTION_ID

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_decimal(self.amount))
        object.__setattr__(self, "description", self.description or "")
        object.__setattr__(self, "transaction_id", self.transaction_id or DEFAULT_TRANSACTION_ID)
