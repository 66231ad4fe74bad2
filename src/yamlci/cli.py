# cli.py
from __future__ import annotations

import os
import sys
from typing import Sequence

import click

from yamlci.config import DEFAULT_FILENAME, RunOptions
from yamlci.errors import ConfigParseError
from yamlci.runner import run_file
from yamlci.ui.console import Console, set_console, get_console

_DOC_SUFFIXES = (".yaml", ".yml")


def discover_document(input_arg: str | None, args: Sequence[str]) -> str:
    """
    Pick the pipeline document to run.

    Order: --input, then the last positional argument ending in
    .yaml/.yml, then runner.yaml.
    """
    if input_arg:
        return input_arg
    candidates = [a for a in args if a.endswith(_DOC_SUFFIXES)]
    if candidates:
        return candidates[-1]
    return DEFAULT_FILENAME


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option("-i", "--input", "input_", default=None, help="Pipeline document (defaults to runner.yaml)")
@click.option("--prefix", default=None, envvar="YAMLCI_PREFIX", help="Step field shown before each output, e.g. name")
@click.option("--pretty/--no-pretty", default=None, envvar="YAMLCI_PRETTY", help="Print the pipeline name as a header")
@click.option("--colored/--no-colored", default=None, envvar="YAMLCI_COLORED", help="Colorize step labels")
@click.option("--table/--no-table", default=None, envvar="YAMLCI_TABLE", help="Render results as a table")
@click.option("--workers", default=None, type=int, envvar="YAMLCI_WORKERS", help="Max concurrent steps per job")
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show commands and stack traces)",
)
def cli(args, input_, prefix, pretty, colored, table, workers, debug):
    """yamlci — run the jobs of a YAML pipeline document."""
    console = Console(debug=debug)
    set_console(console)

    filename = discover_document(input_, args)
    options = RunOptions(
        pwd=os.getcwd(),
        filename=filename,
        prefix=prefix,
        pretty=pretty,
        colored=colored,
        table=table,
        max_workers=workers,
    )
    console.print_debug(f"document: {os.path.join(options.pwd, filename)}")

    try:
        result = run_file(options)
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except ConfigParseError as e:
        console.print_error(
            "Could not load pipeline document",
            str(e),
            suggestion=f"Create {DEFAULT_FILENAME} or pass one explicitly:\n  yamlci -i my_pipeline.yaml",
        )
        sys.exit(1)
    except Exception as e:
        get_console().print_exception(e)
        sys.exit(1)

    if result.ok:
        console.print_output(result.output or "")
    else:
        console.print_validation_error(result.error)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
