"""Application service: Add Part use case."""

from __future__ import annotations

from autoparts.application.dto import PartDTO, to_part_dto
from autoparts.domain.model.inventory import Inventory
from autoparts.domain.model.part import AutoPart, PartKind, build_part
from autoparts.domain.model.value_objects import Money, Quantity


class AddPartHandler:

    def __init__(self, inventory: Inventory[AutoPart]) -> None:
        self._inventory = inventory

    def handle(
        self,
        kind: PartKind,
        name: str,
        price: Money,
        quantity: int,
        attribute: float,
    ) -> PartDTO:
        """Add a new part of ``kind`` to the inventory.

        Values arrive already parsed.  Quantity and the part itself reject
        negative stock and blank names with ValidationError before anything
        is stored.
        """
        part = build_part(
            kind,
            name=name.strip(),
            price=price,
            quantity=Quantity(quantity),
            attribute=attribute,
        )
        self._inventory.add_part(part)
        return to_part_dto(part)
