"""Tokenizer for the SVG path mini-language.

Splits a `d` attribute into Commands. Each command is an ASCII letter
followed by a run of non-letter characters holding its numeric arguments.
"""

import re

from svgfontmetrics.domain.command import VALID_COMMANDS, Command
from svgfontmetrics.exceptions import InvalidArgumentError, InvalidCommandError

COMMAND_PATTERN = re.compile(r"([a-zA-Z])([^a-zA-Z]*)")
"""A letter followed by its argument text."""

NUMBER_PATTERN = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)")
"""One SVG number (no exponent: letters always start a new command)."""

SEPARATOR_PATTERN = re.compile(r"[\s,]*")

TOKEN_PATTERN = re.compile(r"[^\s,]+")


def parse_arguments(text: str, offset: int = 0) -> tuple[float, ...]:
    """Parse the argument text of one command.

    Numbers may be separated by whitespace or commas. A sign or a second
    decimal point also starts a new number, so "10-20" reads as 10, -20.

    Args:
        text: Argument text following a command letter
        offset: Position of `text` in the full path string

    Returns:
        Tuple of parsed arguments

    Raises:
        InvalidArgumentError: If a token is not a number
    """
    args: list[float] = []
    pos = 0
    length = len(text)

    while True:
        pos = SEPARATOR_PATTERN.match(text, pos).end()  # type: ignore[union-attr]
        if pos >= length:
            break

        match = NUMBER_PATTERN.match(text, pos)
        if match is None:
            token = TOKEN_PATTERN.match(text, pos).group()  # type: ignore[union-attr]
            raise InvalidArgumentError(token, offset + pos)

        args.append(float(match.group()))
        pos = match.end()

    return tuple(args)


def tokenize(d: str) -> list[Command]:
    """Split path data into commands.

    Args:
        d: Path data string

    Returns:
        Commands in source order (empty for blank path data)

    Raises:
        InvalidCommandError: If a letter is not an SVG path command
        InvalidArgumentError: If an argument is not a number
    """
    commands: list[Command] = []

    first = COMMAND_PATTERN.search(d)
    leading = d if first is None else d[: first.start()]
    stray = TOKEN_PATTERN.search(leading)
    if stray is not None:
        raise InvalidArgumentError(stray.group(), stray.start())

    for match in COMMAND_PATTERN.finditer(d):
        letter = match.group(1)
        if letter not in VALID_COMMANDS:
            raise InvalidCommandError(letter, match.start(1))

        commands.append(
            Command(
                letter=letter,
                args=parse_arguments(match.group(2), match.start(2)),
                position=match.start(1),
            )
        )

    return commands
