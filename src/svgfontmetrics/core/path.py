"""Path interpreter: replays parsed commands into a bounding box.

A Path owns an immutable tuple of Commands. Bounds are computed by
threading a Bounds value through the commands, one replay step at a time.

Curves and arcs are bounded by their end point only. Control points and
arc interiors are ignored, so the box can be smaller than the visible
outline.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from svgfontmetrics.config import RepeatMode
from svgfontmetrics.core.tokenizer import tokenize
from svgfontmetrics.domain.bounds import Bounds
from svgfontmetrics.domain.command import BOUND_POINT, Command
from svgfontmetrics.exceptions import MalformedCommandError


def _argument(command: Command, index: int) -> float:
    """Get one argument of a command, or fail naming the missing index."""
    if index >= len(command.args):
        raise MalformedCommandError(command.letter, index, command.position)
    return command.args[index]


def _bound_point(
    command: Command, kind: str, base: int, pen: tuple[float, float]
) -> tuple[float, float]:
    """Get the point of one argument tuple that affects the bounds.

    Args:
        command: Command being replayed
        kind: Upper-case kind to interpret the tuple as
        base: Index of the first argument of the tuple
        pen: Pen position before this step

    Returns:
        Absolute (x, y) of the bound point
    """
    x_index, y_index = BOUND_POINT[kind]
    pen_x, pen_y = pen

    # Moveto coordinates are absolute in both cases
    if command.is_relative and kind != "M":
        dx = _argument(command, base + x_index) if x_index is not None else 0.0
        dy = _argument(command, base + y_index) if y_index is not None else 0.0
        return (pen_x + dx, pen_y + dy)

    x = _argument(command, base + x_index) if x_index is not None else pen_x
    y = _argument(command, base + y_index) if y_index is not None else pen_y
    return (x, y)


def _steps(command: Command, repeat_mode: RepeatMode) -> Iterator[tuple[str, int]]:
    """Yield (kind, first argument index) for each replay step of a command."""
    kind = command.kind

    if kind == "Z" or repeat_mode == RepeatMode.FIRST:
        yield kind, 0
        return

    arity = command.arity
    if not command.args or len(command.args) % arity:
        raise MalformedCommandError(command.letter, len(command.args), command.position)

    for repetition in range(command.repetitions):
        # Extra moveto tuples are implicit linetos
        step_kind = "L" if kind == "M" and repetition > 0 else kind
        yield step_kind, repetition * arity


@dataclass(frozen=True)
class Path:
    """Parsed SVG path data.

    Example:
        path = Path.parse("M 10 20 L 75 100")
        bounds = path.bounds()
        print(bounds.x1, bounds.y1, bounds.x2, bounds.y2)

    Attributes:
        commands: Commands in source order
    """

    commands: tuple[Command, ...] = ()

    @classmethod
    def parse(cls, d: str) -> "Path":
        """Parse path data.

        Args:
            d: Path data string (the `d` attribute)

        Returns:
            Path instance

        Raises:
            InvalidCommandError: If a letter is not an SVG path command
            InvalidArgumentError: If an argument is not a number
        """
        return cls(commands=tuple(tokenize(d)))

    @classmethod
    def from_commands(cls, commands: Iterable[Command]) -> "Path":
        """Build a path from already parsed commands."""
        return cls(commands=tuple(commands))

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)

    def iter_bounds(
        self, repeat_mode: RepeatMode = RepeatMode.FIRST
    ) -> Iterator[Bounds]:
        """Replay the path, yielding the Bounds after every step.

        In FIRST mode there is one step per command. In EXPAND mode each
        complete argument tuple is its own step.

        Args:
            repeat_mode: How repeated argument tuples are replayed

        Yields:
            Bounds after each replay step

        Raises:
            MalformedCommandError: If a command lacks a needed argument
        """
        bounds = Bounds.empty()
        is_first = True

        for command in self.commands:
            for kind, base in _steps(command, repeat_mode):
                if kind == "Z":
                    bounds = bounds.close()
                else:
                    x, y = _bound_point(command, kind, base, bounds.last_point)
                    if kind == "M":
                        bounds = bounds.move_last_point(x, y, is_first)
                    elif is_first:
                        bounds = bounds.start_at(x, y)
                    else:
                        bounds = bounds.extend(x, y)

                is_first = False
                yield bounds

    def bounds(self, repeat_mode: RepeatMode = RepeatMode.FIRST) -> Bounds:
        """Compute the bounding box of the path.

        Args:
            repeat_mode: How repeated argument tuples are replayed

        Returns:
            Final Bounds (the zero box for an empty path)

        Raises:
            MalformedCommandError: If a command lacks a needed argument
        """
        final = Bounds.empty()
        for final in self.iter_bounds(repeat_mode):
            pass
        return final


def path_bounds(d: str, repeat_mode: RepeatMode = RepeatMode.FIRST) -> Bounds:
    """Parse path data and compute its bounding box.

    Args:
        d: Path data string
        repeat_mode: How repeated argument tuples are replayed

    Returns:
        Bounding box of the path

    Raises:
        PathError: If the path cannot be parsed or replayed
    """
    return Path.parse(d).bounds(repeat_mode)
