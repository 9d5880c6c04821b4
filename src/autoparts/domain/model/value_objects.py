"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal, InvalidOperation, Overflow, localcontext

from autoparts.domain.exceptions import InvalidInputError, ValidationError

# Unit prices must stay below 10**15.
MAX_PRICE_EXPONENT = 14

PRICE_NOT_A_NUMBER = "El precio debe ser un número."
PRICE_TOO_LARGE = "El precio es demasiado grande."

# Sums and products of stock values are exact: no rounding to 28 digits.
_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, traps=[InvalidOperation, Overflow])


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount, displayed as ``$12.50``.

    Uses Decimal so that summing many ``price * quantity`` products does
    not drift the way floats do.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"El importe debe ser un Decimal, no {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(PRICE_NOT_A_NUMBER)
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"El precio no puede ser negativo ({self.amount})"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        with localcontext(_EXACT):
            return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Solo se puede multiplicar por un entero, no {type(factor).__name__}")
        with localcontext(_EXACT):
            return Money(self.amount * factor)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | int | Decimal) -> Money:
        """Parse a unit price typed by the user.

        Raises InvalidInputError for text that is not a finite number or
        for prices of 10**15 and above.
        """
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise InvalidInputError(PRICE_NOT_A_NUMBER) from exc
        if not value.is_finite():
            raise InvalidInputError(PRICE_NOT_A_NUMBER)
        if value != 0 and value.adjusted() > MAX_PRICE_EXPONENT:
            raise InvalidInputError(PRICE_TOO_LARGE)
        return Money(value)

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))


@dataclass(frozen=True)
class Quantity:
    """A non-negative integer stock count.

    Zero is allowed: a part can be listed while out of stock.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"La cantidad debe ser un número entero, no {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValidationError(
                f"La cantidad no puede ser negativa ({self.value})"
            )

    def __str__(self) -> str:
        return str(self.value)
