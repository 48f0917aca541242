"""Parsed SVG path commands.

This module defines the Command type produced by the tokenizer, along with
the per-command tables the interpreter needs:

- VALID_COMMANDS: the 20 path command letters
- ARITY: size of one argument tuple for each command kind
- BOUND_POINT: argument indices of the point that affects the bounds
"""

from dataclasses import dataclass
from typing import Any

VALID_COMMANDS = frozenset("MmLlHhVvCcSsQqTtAaZz")

ARITY: dict[str, int] = {
    "M": 2,
    "L": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "S": 4,
    "Q": 4,
    "T": 2,
    "A": 7,
    "Z": 0,
}

# (x index, y index); None means the coordinate comes from the pen
BOUND_POINT: dict[str, tuple[int | None, int | None]] = {
    "M": (0, 1),
    "L": (0, 1),
    "H": (0, None),
    "V": (None, 0),
    "C": (4, 5),
    "S": (2, 3),
    "Q": (2, 3),
    "T": (0, 1),
    "A": (5, 6),
}


@dataclass(frozen=True, slots=True)
class Command:
    """One parsed path operation.

    Repeated argument tuples after a single letter are kept together, so
    "L 10 10 20 20" is one Command with four arguments.

    Attributes:
        letter: Command letter; lowercase means relative coordinates
        args: Numeric arguments in source order
        position: Offset of the letter in the path string
    """

    letter: str
    args: tuple[float, ...] = ()
    position: int = 0

    @property
    def kind(self) -> str:
        """Upper-case command letter."""
        return self.letter.upper()

    @property
    def is_relative(self) -> bool:
        """Whether the arguments are offsets from the pen."""
        return self.letter.islower()

    @property
    def arity(self) -> int:
        """Number of arguments in one tuple of this command."""
        return ARITY[self.kind]

    @property
    def repetitions(self) -> int:
        """Number of complete argument tuples carried by this command."""
        if self.arity == 0:
            return 1
        return len(self.args) // self.arity

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with letter, args and position fields
        """
        return {
            "letter": self.letter,
            "args": list(self.args),
            "position": self.position,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Command":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with letter, args and position fields

        Returns:
            Command instance
        """
        return cls(
            letter=data["letter"],
            args=tuple(float(a) for a in data["args"]),
            position=data.get("position", 0),
        )
