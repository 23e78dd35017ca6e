import logging

import click

from loopfpy import LoopF
from loopfpy.batch import FUNCTIONS, evaluate
from loopfpy.env import LOG_LEVELS, default_log_level


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(sorted(LOG_LEVELS), case_sensitive=False),
    default=None,
    help="Logging level. Defaults to $LOOPFPY_LOG_LEVEL or WARNING.",
)
def cli(log_level: str | None) -> None:
    logging.basicConfig(
        level=(log_level or default_log_level()).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="list")
def list_functions() -> None:
    """List the available loop functions."""
    for name, (_, arity) in FUNCTIONS.items():
        click.echo(f"{name}\t{arity}")


@cli.command(name="evaluate")
@click.argument("name")
@click.argument("args", nargs=-1, type=float)
def evaluate_command(name: str, args: tuple[float, ...]) -> None:
    """Evaluate the loop function NAME at ARGS."""
    if name not in FUNCTIONS:
        raise click.BadParameter(f"unknown function {name!r}", param_hint="NAME")
    arity = FUNCTIONS[name][1]
    if len(args) != arity:
        raise click.BadParameter(f"{name} takes {arity} arguments, got {len(args)}", param_hint="ARGS")
    click.echo(repr(float(evaluate(name, *args))))


@cli.command()
@click.option(
    "--config",
    required=True,
    type=str,
    help="Specify the path to the config file to be used.",
)
@click.option(
    "--output",
    type=str,
    default="",
    help="File path for the results. Overrides the provided path in the config.",
)
@click.option(
    "--processes",
    type=int,
    default=None,
    help="Number of worker processes. Overrides the config and $LOOPFPY_PROCESSES.",
)
def compute(config: str, output: str, processes: int | None) -> None:
    try:
        handler = LoopF(config, path_output=output, processes=processes)
    except Exception as e:
        raise click.ClickException(str(e)) from e
    handler.run()
    if not handler.config.path_output:
        click.echo(handler.export().to_dataframe().to_string(index=False))
    else:
        handler.export()
