"""Application service: Remove Part use case."""

from __future__ import annotations

from autoparts.application.dto import PartDTO, to_part_dto
from autoparts.domain.exceptions import PartNotFoundError
from autoparts.domain.model.inventory import Inventory
from autoparts.domain.model.part import AutoPart


class RemovePartHandler:

    def __init__(self, inventory: Inventory[AutoPart]) -> None:
        self._inventory = inventory

    def handle(self, name: str) -> PartDTO:
        """Remove the first part called ``name`` (any case).

        Only one instance goes even when several parts share the name.
        """
        part = self._inventory.remove_part(name)
        if part is None:
            raise PartNotFoundError(f"No se encontró el repuesto con el nombre {name}.")
        return to_part_dto(part)
