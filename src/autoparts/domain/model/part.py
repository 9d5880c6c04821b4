"""AutoPart family — the stock items the store sells.

Every part shares a name, a unit price and a stock quantity.  Each concrete
kind adds exactly one numeric attribute and knows how to render itself as
a detail string for listings and search results.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from autoparts.domain.exceptions import ValidationError
from autoparts.domain.model.value_objects import Money, Quantity


class PartKind(Enum):
    ELECTRICAL = "Repuesto Eléctrico"
    MECHANICAL = "Repuesto Mecánico"

    @property
    def label(self) -> str:
        return self.value


@dataclass
class AutoPart(ABC):
    """Abstract base for stock items.

    ``name`` is the lookup key but is not unique: two parts may share a
    name and lookups resolve to the first one added.  ``quantity`` is
    mutable; everything else is fixed once the part is in the inventory.
    """

    kind: ClassVar[PartKind]

    name: str
    price: Money
    quantity: Quantity

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("El nombre del repuesto es obligatorio.")

    @abstractmethod
    def describe(self) -> str:
        """Return the human-readable detail string for this part."""

    @property
    @abstractmethod
    def attribute(self) -> float:
        """The kind-specific numeric attribute (voltage, weight...)."""

    @property
    def stock_value(self) -> Money:
        return self.price * self.quantity.value

    def matches(self, name: str) -> bool:
        """Case-insensitive exact comparison against ``name``."""
        return self.name.casefold() == name.casefold()

    def _common_details(self) -> str:
        return (
            f"{self.kind.label}: {self.name}, Precio: {self.price}, "
            f"Cantidad: {self.quantity}"
        )


@dataclass
class ElectricalPart(AutoPart):
    kind: ClassVar[PartKind] = PartKind.ELECTRICAL

    voltage: float

    @property
    def attribute(self) -> float:
        return self.voltage

    def describe(self) -> str:
        return f"{self._common_details()}, Voltaje: {self.voltage} V"


@dataclass
class MechanicalPart(AutoPart):
    kind: ClassVar[PartKind] = PartKind.MECHANICAL

    weight: float  # kilograms

    @property
    def attribute(self) -> float:
        return self.weight

    def describe(self) -> str:
        return f"{self._common_details()}, Peso: {self.weight} kg"


def build_part(
    kind: PartKind,
    name: str,
    price: Money,
    quantity: Quantity,
    attribute: float,
) -> AutoPart:
    """Construct the concrete part class for ``kind``."""
    if kind is PartKind.ELECTRICAL:
        return ElectricalPart(name=name, price=price, quantity=quantity, voltage=attribute)
    if kind is PartKind.MECHANICAL:
        return MechanicalPart(name=name, price=price, quantity=quantity, weight=attribute)
    raise ValidationError(f"Unknown part kind: {kind!r}")
