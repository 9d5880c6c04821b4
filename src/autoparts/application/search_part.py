"""Application service: Search Part use case (query)."""

from __future__ import annotations

from autoparts.application.dto import PartDTO, to_part_dto
from autoparts.domain.model.inventory import PartSearchable


class SearchPartHandler:

    def __init__(self, inventory: PartSearchable) -> None:
        self._inventory = inventory

    def handle(self, name: str) -> PartDTO | None:
        part = self._inventory.search_part(name)
        if part is None:
            return None
        return to_part_dto(part)
