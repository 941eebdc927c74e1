# ABOUTME: CLI package for pubcore, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import logging

import click

from pubcore.cli.commands import format_cmd, identify_cmd


@click.group()
@click.version_option(package_name="pubcore")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """pubcore - inspect digital publication formats."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


cli.add_command(format_cmd.format_)
cli.add_command(identify_cmd.identify)
