"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry part data from the application handlers to the menu loop
without handing out the mutable domain objects themselves.
"""

from __future__ import annotations

from dataclasses import dataclass

from autoparts.domain.model.part import AutoPart


@dataclass(frozen=True)
class PartDTO:
    """Output: a single part as displayed to the user."""

    kind: str
    name: str
    price: str  # formatted, e.g. "$50.00"
    quantity: int
    attribute: float
    details: str


def to_part_dto(part: AutoPart) -> PartDTO:
    return PartDTO(
        kind=part.kind.name,
        name=part.name,
        price=str(part.price),
        quantity=part.quantity.value,
        attribute=part.attribute,
        details=part.describe(),
    )
