"""Composition root — wires the inventory to its handlers and the menu loop.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on the layer beneath it.
"""

from __future__ import annotations

from typing import TextIO

from autoparts.domain.model.inventory import Inventory
from autoparts.domain.model.part import AutoPart
from autoparts.infrastructure.cli.store_controller import StoreController


def inventory() -> Inventory[AutoPart]:
    # In-memory only: stock is lost when the process exits.
    return Inventory()


def store_controller(stdin: TextIO) -> StoreController:
    return StoreController(inventory=inventory(), stdin=stdin)
