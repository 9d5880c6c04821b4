import click

from autoparts.infrastructure import bootstrap
from autoparts.infrastructure.logging_config import LOG_LEVELS, configure_logging


@click.command()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="AUTOPARTS_LOG_LEVEL",
    help="Verbosity of diagnostics written to stderr.",
)
def cli(log_level: str) -> None:
    """Tienda de Repuestos de Autos — interactive inventory menu."""
    configure_logging(log_level)
    controller = bootstrap.store_controller(stdin=click.get_text_stream("stdin"))
    controller.run()
