"""kiss-setmode command line interface."""
import logging

import click

from . import __version__, constants, modes, util
from .exceptions import ConfigurationError, SetModeError
from .setmode import Connection, set_mode, SetModeConfig

__author__ = "kiss-setmode Contributors"
__copyright__ = "Copyright 2024 kiss-setmode Contributors"
__license__ = "Apache License, Version 2.0"


EPILOG = "\n\n".join(
    ["\b\n" + table for table in modes.format_table().split("\n\n")]
    + [
        "Before running this utility ensure the mode DIP switches are all set "
        "to ON (1111) and the firmware is at least v41.",
        "\b\nExample, set mode to 3 without permanently storing to memory:\n"
        "  kiss-setmode --mode 3",
        "More info at https://wiki.oarc.uk/packet:ninotnc",
    ]
)


class HelpWithoutArgsCommand(click.Command):
    """Print the help and exit 0 when run without arguments."""

    def parse_args(self, ctx, args):
        if not args and not ctx.resilient_parsing:
            click.echo(ctx.get_help(), color=ctx.color)
            ctx.exit(0)
        return super().parse_args(ctx, args)


@click.command(
    cls=HelpWithoutArgsCommand,
    epilog=EPILOG,
    context_settings={"max_content_width": 100},
)
@click.option(
    "--connection",
    type=click.Choice([c.value for c in Connection], case_sensitive=False),
    default=constants.DEFAULT_CONNECTION,
    show_default=True,
    envvar="KISS_CONNECTION",
    help="Connection type.",
)
@click.option(
    "--host",
    default=constants.DEFAULT_HOST,
    show_default=True,
    envvar="KISS_HOST",
    help="TCP host (if connection is tcp).",
)
@click.option(
    "--port",
    type=int,
    default=constants.DEFAULT_TCP_PORT,
    show_default=True,
    envvar="KISS_PORT",
    help="TCP port (if connection is tcp).",
)
@click.option(
    "--serial-port",
    default=constants.DEFAULT_SERIAL_PORT,
    show_default=True,
    envvar="KISS_SERIAL",
    help="Serial port (if connection is serial).",
)
@click.option("--mode", type=int, required=True, help="Mode value to set.")
@click.option(
    "--write",
    "persist",
    is_flag=True,
    default=False,
    help="Permanently store the mode (does not add 16 to the provided mode).",
)
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
@click.version_option(__version__, prog_name="kiss-setmode")
def main(connection, host, port, serial_port, mode, persist, debug):
    """Set the operating mode of a KISS TNC over serial or TCP."""
    if debug:
        util.set_log_level(logging.DEBUG)

    try:
        config = SetModeConfig(
            mode=mode,
            persist=persist,
            connection=connection,
            host=host,
            port=port,
            serial_port=serial_port,
        )
        set_mode(config)
    except ConfigurationError as exc:
        raise click.UsageError(str(exc)) from exc
    except SetModeError as exc:
        raise click.ClickException(str(exc)) from exc
