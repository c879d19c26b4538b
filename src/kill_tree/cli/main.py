"""Command line interface: kill-tree PROCESS_ID [SIGNAL]."""

import asyncio
import sys
from pathlib import Path
from typing import List

import click
import yaml
from rich.console import Console
from rich.table import Table

from .. import __version__
from ..api import kill_tree_with_config, kill_tree_with_config_async
from ..core.config import Config, KillTreeSettings, load_config
from ..core.errors import KillTreeError
from ..core.models import KilledProcess, Outcome
from ..errors.translator import ErrorTranslator
from ..utils.rich_logging import setup_logging


console = Console()
err_console = Console(stderr=True)


def _outcome_table(outcomes: List[Outcome]) -> Table:
    table = Table()
    table.add_column("#", justify="right")
    table.add_column("Status")
    table.add_column("PID", justify="right")
    table.add_column("Parent PID", justify="right")
    table.add_column("Name / Reason")

    for index, outcome in enumerate(outcomes):
        if isinstance(outcome, KilledProcess):
            table.add_row(
                str(index),
                "[green]killed[/]",
                str(outcome.pid),
                str(outcome.parent_pid),
                outcome.name,
            )
        else:
            table.add_row(
                str(index),
                "[yellow]maybe already terminated[/]",
                str(outcome.pid),
                "-",
                outcome.reason,
            )
    return table


@click.command(name="kill-tree")
@click.argument("process_id", type=int)
@click.argument("signal_name", metavar="[SIGNAL]", required=False)
@click.option("--quiet", "-q", is_flag=True, help="No output on success")
@click.option(
    "--include-target/--exclude-target",
    default=None,
    help="Kill PROCESS_ID itself too, or only its descendants (default: from config)",
)
@click.option("--concurrent", is_flag=True, help="Signal all processes concurrently")
@click.option(
    "--config", "-c", "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    help="YAML file with 'signal' and 'include_target'",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Diagnostic log level (default: KILL_TREE_LOG_LEVEL or WARNING)",
)
@click.version_option(__version__, prog_name="kill-tree")
def cli(process_id, signal_name, quiet, include_target, concurrent, config_path, log_level):
    """Kill PROCESS_ID and all of its children with SIGNAL (default SIGTERM).

    SIGNAL is ignored on Windows.
    """
    translator = ErrorTranslator()
    try:
        settings = KillTreeSettings()
        setup_logging("ERROR" if quiet else (log_level or settings.log_level))

        config = load_config(config_path, settings)
        overrides = {}
        if signal_name:
            overrides["signal"] = signal_name
        if include_target is not None:
            overrides["include_target"] = include_target
        if overrides:
            config = Config(**{**config.model_dump(), **overrides})

        if not quiet:
            console.print(
                f"[bold]Killing process with all children.[/] "
                f"process id: {process_id}, signal: {config.signal}"
            )

        if concurrent:
            outcomes = asyncio.run(kill_tree_with_config_async(process_id, config))
        else:
            outcomes = kill_tree_with_config(process_id, config)

    except (KillTreeError, ValueError, OSError, yaml.YAMLError) as e:
        err_console.print(translator.format_for_cli(translator.translate(e)))
        sys.exit(1)

    if quiet:
        return

    if not outcomes:
        console.print("[yellow]No processes were killed.[/]")
        return

    killed = sum(1 for outcome in outcomes if isinstance(outcome, KilledProcess))
    console.print(_outcome_table(outcomes))
    console.print(
        f"[green]✓ Killing is done.[/] killed: {killed}, "
        f"maybe already terminated: {len(outcomes) - killed}"
    )


if __name__ == "__main__":
    cli()
