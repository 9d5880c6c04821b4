"""Inventory aggregate — the store's ordered collection of parts.

The inventory keeps parts in insertion order (listing order) and resolves
names with a linear, case-insensitive scan.  It does not enforce unique
names; search and removal act on the first match.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Generic, Iterator, TypeVar

from autoparts.domain.model.part import AutoPart
from autoparts.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=AutoPart)


class PartSearchable(ABC):

    @abstractmethod
    def search_part(self, name: str) -> AutoPart | None:
        """Return the first part called ``name`` (any case), or None."""


class Inventory(PartSearchable, Generic[P]):

    def __init__(self) -> None:
        self._parts: list[P] = []

    def add_part(self, part: P) -> None:
        """Append ``part``.  Always succeeds, duplicates included."""
        self._parts.append(part)
        logger.info("Added %s part %r (%d in inventory)", part.kind.name, part.name, len(self._parts))

    def search_part(self, name: str) -> P | None:
        for part in self._parts:
            if part.matches(name):
                return part
        return None

    def remove_part(self, name: str) -> P | None:
        """Remove the first part called ``name`` and return it.

        Returns None and leaves the inventory untouched when nothing
        matches.
        """
        for index, part in enumerate(self._parts):
            if part.matches(name):
                del self._parts[index]
                logger.info("Removed part %r (%d left)", part.name, len(self._parts))
                return part
        logger.debug("Remove requested for unknown part %r", name)
        return None

    def list_parts(self) -> list[P]:
        return list(self._parts)

    def calculate_total_value(self) -> Money:
        total = Money.zero()
        for part in self._parts:
            total = total + part.stock_value
        return total

    @property
    def is_empty(self) -> bool:
        return not self._parts

    def __len__(self) -> int:
        return len(self._parts)

    def __iter__(self) -> Iterator[P]:
        return iter(list(self._parts))
