"""TAssist CLI - student contact manager."""

import logging
import sys

import click

from .config import load_config
from .core.commands import help_text
from .core.exceptions import TAssistError
from .logic import LogicManager, format_person_list, get_store, load_model

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, level, logging.INFO),
    )


def _build_logic(ctx: click.Context) -> LogicManager:
    config = ctx.obj["config"]
    store = get_store(config)
    return LogicManager(load_model(store), store)


def _show_persons(logic: LogicManager) -> None:
    persons = logic.get_filtered_person_list()
    if not persons:
        click.echo("No persons to show.")
        return
    click.echo(format_person_list(persons))


@click.group(invoke_without_command=True)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--data-file", default=None, type=click.Path(dir_okay=False),
              help="Data file to use instead of the configured one")
@click.version_option()
@click.pass_context
def main(ctx, debug: bool, data_file: str | None):
    """TAssist - student contact manager for teaching assistants."""
    config = load_config()
    if data_file:
        config.data_file = data_file
    _setup_logging("DEBUG" if debug else config.log_level)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config

    if ctx.invoked_subcommand is None:
        ctx.invoke(repl)


@main.command()
@click.pass_context
def repl(ctx):
    """Read commands interactively until 'exit'."""
    logic = _build_logic(ctx)
    click.echo("TAssist - type 'help' for the list of commands.")

    while True:
        try:
            command_text = click.prompt(">", prompt_suffix=" ")
        except click.Abort:
            click.echo()
            break

        try:
            result = logic.execute(command_text)
        except TAssistError as e:
            click.echo(str(e), err=True)
            continue

        click.echo(result.feedback)
        if result.show_help:
            click.echo()
            click.echo(help_text())
        if result.exit:
            break
        if not result.show_help:
            _show_persons(logic)


@main.command()
@click.argument("words", nargs=-1, required=True)
@click.pass_context
def run(ctx, words: tuple[str, ...]):
    """Run a single command, e.g. tassist run delete 1."""
    logic = _build_logic(ctx)
    try:
        result = logic.execute(" ".join(words))
    except TAssistError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(result.feedback)
    if result.show_help:
        click.echo()
        click.echo(help_text())


@main.command("list-persons")
@click.pass_context
def list_persons(ctx):
    """Print every stored person with its index."""
    _show_persons(_build_logic(ctx))


@main.command()
@click.pass_context
def bot(ctx):
    """Run the Telegram bot."""
    try:
        from .telegram_bot import run_bot
        click.echo("Starting TAssist Telegram bot...")
        click.echo("Press Ctrl+C to stop")
        run_bot(ctx.obj["config"])
    except ImportError as e:
        click.echo("Error: Missing dependencies. Run 'pip install python-telegram-bot'", err=True)
        click.echo(f"Details: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nBot stopped.")


if __name__ == "__main__":
    main()
