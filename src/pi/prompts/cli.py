"""CLI entry point for pi-prompts. Uses Click for argument parsing.

Each command runs one of the demo prompts and echoes the answer.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from dataclasses import dataclass

import click

from pi.prompts.prompts import (
    AutocompletePrompt,
    ConfirmPrompt,
    InputStyle,
    MultiSelectPrompt,
    Prompt,
    SelectPrompt,
    TextPrompt,
)

logger = logging.getLogger(__name__)

ABORTED_MESSAGE = "Prompt was aborted!"

WORDS = [
    "The", "quick", "brown", "fox", "jumps", "over", "the", "lazy", "dog",
    "lorem", "ipsum", "dolar", "sit",
]

TOPPINGS = [
    "cheese", "tomato", "ham", "mushroom", "pineapple", "pepperoni",
    "onion", "olive", "salami",
]

PLACES = ["The north", "The south", "The west", "The east"]


@dataclass
class Person:
    first_name: str
    last_name: str
    id: int

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"


PEOPLE = [
    Person("John", "Doe", 5),
    Person("Jane", "Doe", 3),
    Person("AN", "Other", 7),
]


def _ask(prompt: Prompt):
    """Run a prompt synchronously."""
    logger.debug("running %r", prompt)
    return asyncio.run(prompt.run())


def _password_validator(value: str) -> str | None:
    if not value:
        return "You must type something!"
    if len(value) > 20:
        return "You must not type more than 20 characters!"
    return None


@click.group(invoke_without_command=True)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    help="Logging level (default: warning)",
)
@click.option("--log-file", default=None, help="Write logs to this file instead of stderr")
@click.pass_context
def main(ctx, log_level, log_file):
    """Interactive terminal prompt demos."""
    # stdout belongs to the prompt
    destination = {"filename": log_file} if log_file else {"stream": sys.stderr}
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        **destination,
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# ---------------------------------------------------------------------------
# List prompts
# ---------------------------------------------------------------------------

@main.command()
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Visible rows")
def select(limit):
    """Choose a word."""
    prompt = SelectPrompt("Choose a word", WORDS)
    if limit is not None:
        prompt.with_limit(limit)
    choice = _ask(prompt)
    if choice is None:
        click.echo(ABORTED_MESSAGE)
    else:
        click.echo(f"Your choice is: {choice}")


@main.command()
def person():
    """Choose a person and print their id."""
    chosen = _ask(SelectPrompt("Choose a person", PEOPLE))
    if chosen is None:
        click.echo(ABORTED_MESSAGE)
    else:
        click.echo(f"That person's id is: {chosen.id}")


@main.command()
def autocomplete():
    """Choose a word, typing to narrow the list."""
    choice = _ask(AutocompletePrompt("Choose a word", WORDS))
    if choice is None:
        click.echo(ABORTED_MESSAGE)
    else:
        click.echo(f"Your choice is: {choice}")


@main.command()
def multiselect():
    """Choose pizza toppings."""
    choices = _ask(MultiSelectPrompt("Choose your toppings", TOPPINGS))
    if choices is None:
        click.echo(ABORTED_MESSAGE)
    else:
        click.echo(f"Your choices are: {', '.join(choices)}")


# ---------------------------------------------------------------------------
# Text prompts
# ---------------------------------------------------------------------------

@main.command()
def text():
    """Type your name."""
    value = _ask(TextPrompt("What is your name?"))
    if value is None:
        click.echo(ABORTED_MESSAGE)
    else:
        click.echo(f"You wrote: {value}")


@main.command()
def password():
    """Type a password of 1 to 20 characters."""
    prompt = (
        TextPrompt("What is your password?")
        .with_validator(_password_validator)
        .with_style(InputStyle.PASSWORD)
    )
    value = _ask(prompt)
    if value is None:
        click.echo(ABORTED_MESSAGE)
    else:
        click.echo(f"You wrote: {value}")


@main.command()
@click.option("--default", "default", type=click.Choice(["yes", "no"]), default="yes")
def confirm(default):
    """Answer a yes/no question."""
    answer = _ask(ConfirmPrompt("Are you sure?").with_initial(default == "yes"))
    if answer is None:
        click.echo(ABORTED_MESSAGE)
    elif answer:
        click.echo("You were sure!")
    else:
        click.echo("You were not sure!")


@main.command()
def series():
    """Ask several questions in a row."""
    first_name = _ask(TextPrompt("What is your first name?"))
    if first_name is None:
        click.echo(ABORTED_MESSAGE)
        sys.exit(1)

    last_name = _ask(TextPrompt("What is your last name?"))
    if last_name is None:
        click.echo(ABORTED_MESSAGE)
        sys.exit(1)

    place = _ask(SelectPrompt("Where are you from?", PLACES))
    if place is None:
        click.echo(ABORTED_MESSAGE)
        sys.exit(1)

    click.echo(f"You are {first_name} {last_name} from {place}!")


if __name__ == "__main__":
    main()
