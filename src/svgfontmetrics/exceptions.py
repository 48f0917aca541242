"""Exception hierarchy for svgfontmetrics."""


class SvgFontMetricsError(Exception):
    """Base exception for all svgfontmetrics errors."""

    pass


class PathError(SvgFontMetricsError):
    """Errors related to parsing or replaying SVG path data."""

    pass


ParseError = PathError


class InvalidCommandError(PathError):
    """Path data contains a letter that is not an SVG path command."""

    def __init__(self, letter: str, position: int) -> None:
        self.letter = letter
        self.position = position
        super().__init__(f"Invalid path command '{letter}' at position {position}")


class InvalidArgumentError(PathError):
    """Path data contains an argument that is not a number."""

    def __init__(self, token: str, position: int) -> None:
        self.token = token
        self.position = position
        super().__init__(f"Invalid numeric argument '{token}' at position {position}")


class MalformedCommandError(PathError):
    """A command does not carry the argument needed to compute its bounds."""

    def __init__(self, command: str, index: int, position: int) -> None:
        self.command = command
        self.index = index
        self.position = position
        super().__init__(
            f"Command '{command}' at position {position} is missing argument {index}"
        )


class FontError(SvgFontMetricsError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading an SVG font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontFormatError(FontError):
    """SVG font is missing a required element or attribute."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid font format '{path}': {details}")
