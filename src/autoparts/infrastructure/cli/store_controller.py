"""Interactive menu loop for the auto parts store.

The controller owns the conversation with the user: it prints the menu,
reads one line per prompt, parses numbers, calls the application handlers
and reports the outcome.  Parse failures abort only the operation in
progress; the loop keeps running until the user picks "Salir" or stdin
runs dry.
"""

from __future__ import annotations

import logging
from typing import Callable, TextIO

import click

from autoparts.application.add_part import AddPartHandler
from autoparts.application.remove_part import RemovePartHandler
from autoparts.application.search_part import SearchPartHandler
from autoparts.application.show_inventory import ListPartsHandler, TotalValueHandler
from autoparts.domain.exceptions import DomainException, InvalidInputError, PartNotFoundError
from autoparts.domain.model.inventory import Inventory
from autoparts.domain.model.part import AutoPart, PartKind
from autoparts.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

EXIT_OPTION = 7
INVALID_OPTION = 0

MENU = (
    "\n--- Menú de Tienda de Repuestos de Autos ---\n"
    "1. Agregar repuesto eléctrico\n"
    "2. Agregar repuesto mecánico\n"
    "3. Buscar repuesto\n"
    "4. Eliminar repuesto\n"
    "5. Listar repuestos\n"
    "6. Calcular valor total del inventario\n"
    "7. Salir"
)

# Prompt and parse-error text for the kind-specific attribute.
_ATTRIBUTE_PROMPTS: dict[PartKind, tuple[str, str, str]] = {
    PartKind.ELECTRICAL: (
        "Agregar un nuevo repuesto eléctrico:",
        "Voltaje del repuesto: ",
        "El voltaje debe ser un número.",
    ),
    PartKind.MECHANICAL: (
        "Agregar un nuevo repuesto mecánico:",
        "Peso del repuesto (en kg): ",
        "El peso debe ser un número.",
    ),
}


def _parse_int(raw: str | None, message: str) -> int:
    try:
        return int(raw or "")
    except ValueError:
        raise InvalidInputError(message)


def _parse_float(raw: str | None, message: str) -> float:
    try:
        return float(raw or "")
    except ValueError:
        raise InvalidInputError(message)


def _parse_option(raw: str) -> int:
    """Menu selections that are not integers become INVALID_OPTION."""
    try:
        return int(raw)
    except ValueError:
        return INVALID_OPTION


class StoreController:

    def __init__(self, inventory: Inventory[AutoPart], stdin: TextIO) -> None:
        self._stdin = stdin
        self._add_part = AddPartHandler(inventory)
        self._search_part = SearchPartHandler(inventory)
        self._remove_part = RemovePartHandler(inventory)
        self._list_parts = ListPartsHandler(inventory)
        self._total_value = TotalValueHandler(inventory)
        self._actions: dict[int, Callable[[], None]] = {
            1: lambda: self._add_part_menu(PartKind.ELECTRICAL),
            2: lambda: self._add_part_menu(PartKind.MECHANICAL),
            3: self._search_part_menu,
            4: self._remove_part_menu,
            5: self._list_parts_menu,
            6: self._total_value_menu,
        }

    def run(self) -> int:
        """Run the menu until option 7 or end of input.

        Returns the number of menu selections processed.
        """
        selections = 0
        while True:
            click.echo(MENU)
            raw = self._read("Selecciona una opción: ")
            if raw is None:
                logger.info("Standard input closed after %d selections", selections)
                click.echo()
                click.echo("Saliendo de la aplicación...")
                return selections

            selections += 1
            option = _parse_option(raw)
            logger.debug("Menu selection %r -> %d", raw, option)

            if option == EXIT_OPTION:
                click.echo("Saliendo de la aplicación...")
                return selections

            action = self._actions.get(option)
            if action is None:
                click.echo("Opción inválida. Intenta de nuevo.")
                continue
            action()

    # --- Menu actions ---------------------------------------------------------

    def _add_part_menu(self, kind: PartKind) -> None:
        title, attribute_prompt, attribute_error = _ATTRIBUTE_PROMPTS[kind]
        try:
            click.echo(title)
            name = self._read("Nombre del repuesto: ") or ""
            price = Money.of(self._read("Precio del repuesto: ") or "")
            quantity = _parse_int(
                self._read("Cantidad en stock: "), "La cantidad debe ser un número."
            )
            attribute = _parse_float(self._read(attribute_prompt), attribute_error)
            dto = self._add_part.handle(kind, name, price, quantity, attribute)
        except DomainException as exc:
            logger.info("Add %s part aborted: %s", kind.name, exc)
            click.echo(f"Error: {exc}")
            return

        click.echo(f"{dto.name} ha sido agregado al inventario.")

    def _search_part_menu(self) -> None:
        name = self._read("Buscar repuesto por nombre: ") or ""
        dto = self._search_part.handle(name)
        if dto is None:
            click.echo(f"No se encontró el repuesto con el nombre {name}.")
            return
        click.echo(f"Repuesto encontrado: {dto.details}")

    def _remove_part_menu(self) -> None:
        name = self._read("Eliminar repuesto por nombre: ") or ""
        try:
            self._remove_part.handle(name)
        except PartNotFoundError as exc:
            click.echo(str(exc))
            return
        click.echo(f"{name} ha sido eliminado del inventario.")

    def _list_parts_menu(self) -> None:
        parts = self._list_parts.handle()
        if not parts:
            click.echo("El inventario está vacío.")
            return

        click.echo("Repuestos en el inventario:")
        for part in parts:
            click.echo(part.details)

    def _total_value_menu(self) -> None:
        click.echo(f"El valor total del inventario es: {self._total_value.handle()}")

    # --- Input ----------------------------------------------------------------

    def _read(self, prompt: str) -> str | None:
        """Print ``prompt`` and read one line; None once stdin is exhausted."""
        click.echo(prompt, nl=False)
        line = self._stdin.readline()
        if not line:
            return None
        return line.strip()
