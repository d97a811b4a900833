# ABOUTME: CLI package for ReadShelf, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import logging

import click

from readshelf.cli.commands import (
    add_cmd,
    browse_cmd,
    clear_cmd,
    edit_cmd,
    info_cmd,
    ls_cmd,
    progress_cmd,
    rm_cmd,
    search_cmd,
)


@click.group()
@click.version_option(package_name="readshelf")
@click.option("-v", "--verbose", count=True, help="Log progress (-vv for debug output).")
def cli(verbose: int) -> None:
    """ReadShelf - a personal ebook catalog."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )


cli.add_command(add_cmd.add)
cli.add_command(browse_cmd.browse)
cli.add_command(clear_cmd.clear)
cli.add_command(edit_cmd.edit)
cli.add_command(info_cmd.info)
cli.add_command(ls_cmd.ls)
cli.add_command(progress_cmd.progress)
cli.add_command(rm_cmd.rm)
cli.add_command(search_cmd.search)
