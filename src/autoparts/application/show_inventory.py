"""Application services: inventory queries (listing and total value)."""

from __future__ import annotations

from autoparts.application.dto import PartDTO, to_part_dto
from autoparts.domain.model.inventory import Inventory
from autoparts.domain.model.part import AutoPart


class ListPartsHandler:

    def __init__(self, inventory: Inventory[AutoPart]) -> None:
        self._inventory = inventory

    def handle(self) -> list[PartDTO]:
        return [to_part_dto(part) for part in self._inventory.list_parts()]


class TotalValueHandler:

    def __init__(self, inventory: Inventory[AutoPart]) -> None:
        self._inventory = inventory

    def handle(self) -> str:
        """Return the stock value formatted as currency, e.g. ``$100.00``."""
        return str(self._inventory.calculate_total_value())
