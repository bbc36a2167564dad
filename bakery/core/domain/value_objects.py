"""
Base Value Object Classes for Domain-Driven Design

Value Objects are immutable domain primitives that have no identity.
They are compared by their values, not by reference.
"""

from abc import ABC
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Self

CENTS = Decimal("0.01")
DEFAULT_CURRENCY = "EGP"


def to_decimal(value: int | float | str | Decimal | None) -> Decimal:
    """Convert a numeric input to a Decimal rounded to cents (None -> 0)."""
    if value is None:
        return Decimal("0.00")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount: {value!r}") from e
    return amount.quantize(CENTS, ROUND_HALF_UP)


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for all value objects.

    Value objects are:
    - Immutable (frozen=True)
    - Compared by value (dataclass equality)
    - Have no identity
    """

    def __post_init__(self):
        """Override to add validation logic."""
        self._validate()

    def _validate(self) -> None:
        """Validate the value object. Override in subclasses."""
        pass


@dataclass(frozen=True)
class Money(ValueObject):
    """
    Money value object for financial calculations.

    Amounts are kept as Decimal rounded half-up to cents and can never be
    negative.

    Example:
        ```python
        size_price = Money.from_float(250)
        total = size_price.add(Money.from_float(20))  # EGP 270.00
        ```
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def _validate(self) -> None:
        """Validate money constraints."""
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", to_decimal(self.amount))
        else:
            object.__setattr__(self, "amount", self.amount.quantize(CENTS, ROUND_HALF_UP))
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")
        if not self.currency or len(self.currency) != 3:
            raise ValueError("Currency must be a 3-letter ISO code")

    def add(self, other: "Money") -> "Money":
        """Add two Money values (must be same currency)."""
        self._check_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def subtract(self, other: "Money") -> "Money":
        """Subtract Money (must be same currency)."""
        self._check_currency(other)
        result = self.amount - other.amount
        if result < 0:
            raise ValueError("Result cannot be negative")
        return Money(amount=result, currency=self.currency)

    def multiply(self, factor: int | float | Decimal) -> "Money":
        """Multiply by a factor."""
        new_amount = self.amount * Decimal(str(factor))
        return Money(amount=new_amount.quantize(CENTS, ROUND_HALF_UP), currency=self.currency)

    def percentage(self, percent: int | float | Decimal) -> "Money":
        """Return the given percentage of this amount."""
        portion = self.amount * Decimal(str(percent)) / Decimal("100")
        return Money(amount=portion.quantize(CENTS, ROUND_HALF_UP), currency=self.currency)

    def min(self, other: "Money") -> "Money":
        """Return the smaller of two amounts."""
        self._check_currency(other)
        return self if self.amount <= other.amount else other

    def is_zero(self) -> bool:
        """Check if amount is zero."""
        return self.amount == Decimal("0")

    def _check_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise ValueError(f"Currency mismatch: {self.currency} vs {other.currency}")

    def __str__(self) -> str:
        return f"{self.currency} {self.amount:,.2f}"

    def __repr__(self) -> str:
        return f"Money(amount={self.amount}, currency='{self.currency}')"

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> "Money":
        """Create a zero Money value."""
        return cls(amount=Decimal("0"), currency=currency)

    @classmethod
    def from_float(cls, amount: int | float | str | Decimal | None, currency: str = DEFAULT_CURRENCY) -> "Money":
        """Create Money from a number (with proper rounding)."""
        return cls(amount=to_decimal(amount), currency=currency)


class StatusEnum(str, Enum):
    """
    Base class for status enums.

    Values are the wire names. Legacy clients send the integer code, which is
    the member's position in declaration order.
    """

    @classmethod
    def values(cls) -> list[str]:
        """Get all possible values."""
        return [e.value for e in cls]

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create from string value (case-insensitive)."""
        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member
        raise ValueError(f"Invalid {cls.__name__}: {value}")

    @classmethod
    def from_code(cls, code: int) -> Self:
        """Create from the legacy integer code."""
        members = list(cls)
        if isinstance(code, bool) or not 0 <= code < len(members):
            raise ValueError(f"Invalid {cls.__name__} code: {code}")
        return members[code]

    @classmethod
    def parse(cls, value: "str | int | StatusEnum") -> Self:
        """Parse a wire value: member, name or legacy integer code."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls.from_code(value)
        if isinstance(value, str) and value.strip().isdigit():
            return cls.from_code(int(value))
        if isinstance(value, str):
            return cls.from_string(value)
        raise ValueError(f"Invalid {cls.__name__}: {value!r}")

    @property
    def code(self) -> int:
        """Legacy integer code."""
        return list(type(self)).index(self)
