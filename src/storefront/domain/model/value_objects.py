"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import ClassVar

from storefront.domain.exceptions import DomainValidationError

_IDENTIFIER_PATTERN = re.compile(r"[a-zA-Z0-9-]+")


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class _Identifier:
    """String identifier made of letters, digits and hyphens."""

    label: ClassVar[str] = "Identifier"

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise DomainValidationError(f"{self.label} cannot be empty")
        if not _IDENTIFIER_PATTERN.fullmatch(self.value):
            raise DomainValidationError(
                f"{self.label} may only contain letters, digits and hyphens"
            )

    @classmethod
    def of(cls, value: str | None = None):
        """Wrap *value*, or generate a fresh UUID when none is given."""
        if not value:
            return cls(str(uuid.uuid4()))
        return cls(value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ProductId(_Identifier):
    label: ClassVar[str] = "ProductId"


@dataclass(frozen=True)
class ItemId(_Identifier):
    label: ClassVar[str] = "ItemId"


# ---------------------------------------------------------------------------
# Money
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise DomainValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise DomainValidationError(f"Invalid money amount: {self.amount}")
        if self.amount < Decimal("0"):
            raise DomainValidationError("Money amount cannot be negative")

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    def __lt__(self, other: Money) -> bool:
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        return self.amount <= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise DomainValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise DomainValidationError(f"Invalid money amount: {amount!r}") from exc


# ---------------------------------------------------------------------------
# Counts
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Stock:
    """Units of a product available for sale. Zero is allowed."""

    quantity: int

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(
            self.quantity, (int, float, Decimal)
        ):
            raise DomainValidationError("Stock quantity must be an integer")
        if self.quantity < 0:
            raise DomainValidationError("Stock quantity cannot be negative")
        if not isinstance(self.quantity, int):
            raise DomainValidationError("Stock quantity must be an integer")

    def __str__(self) -> str:
        return str(self.quantity)


@dataclass(frozen=True)
class Quantity:
    """How many units of a product sit in the cart.

    Bounded to 1..999 per line item.
    """

    MIN: ClassVar[int] = 1
    MAX: ClassVar[int] = 999

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise DomainValidationError("Quantity must be an integer")
        if self.value < self.MIN:
            raise DomainValidationError(f"Quantity must be at least {self.MIN}")
        if self.value > self.MAX:
            raise DomainValidationError(f"Quantity cannot exceed {self.MAX}")

    def add(self, delta: int) -> Quantity:
        """Return a new Quantity shifted by *delta*, re-checking the bounds."""
        return Quantity(self.value + delta)

    def __str__(self) -> str:
        return str(self.value)


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProductName:

    MAX_LENGTH: ClassVar[int] = 100

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise DomainValidationError("Product name must be a string")
        if not self.value.strip():
            raise DomainValidationError("Product name cannot be empty")
        if len(self.value) > self.MAX_LENGTH:
            raise DomainValidationError(
                f"Product name cannot exceed {self.MAX_LENGTH} characters"
            )

    @staticmethod
    def of(value: str) -> ProductName:
        if not isinstance(value, str):
            raise DomainValidationError("Product name must be a string")
        return ProductName(value.strip())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ProductDescription:

    MAX_LENGTH: ClassVar[int] = 2000

    value: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise DomainValidationError("Product description must be a string")
        if len(self.value) > self.MAX_LENGTH:
            raise DomainValidationError(
                f"Product description cannot exceed {self.MAX_LENGTH} characters"
            )

    @staticmethod
    def of(value: str | None = "") -> ProductDescription:
        if value is None:
            return ProductDescription()
        if not isinstance(value, str):
            raise DomainValidationError("Product description must be a string")
        return ProductDescription(value.strip())

    def __str__(self) -> str:
        return self.value
