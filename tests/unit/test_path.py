"""Unit tests for the path interpreter.

Curves and arcs are bounded by their end points only, so every curve case
below expects the box spanned by the start and end points.
"""

import pytest

from svgfontmetrics.config import RepeatMode
from svgfontmetrics.core.path import Path, path_bounds
from svgfontmetrics.domain import Bounds, Command
from svgfontmetrics.exceptions import InvalidCommandError, MalformedCommandError

DIAGONAL = (10.0, 20.0, 50.0, 50.0)


class TestPathParse:
    """Tests for building Path objects."""

    def test_parse(self):
        """Test that parsing keeps commands in order."""
        path = Path.parse("M 0 0 L 10 10 20 20")
        assert len(path) == 2
        assert [c.letter for c in path] == ["M", "L"]
        assert path.commands[1].args == (10.0, 10.0, 20.0, 20.0)

    def test_invalid_command(self):
        """Test that an unknown letter fails instead of being ignored."""
        with pytest.raises(InvalidCommandError):
            Path.parse("M 0 0 W 10 10 20 20")

    def test_from_commands(self):
        """Test building a path from parsed commands."""
        path = Path.from_commands([Command("M", (1.0, 2.0)), Command("l", (3.0, 4.0))])
        assert path.bounds().to_tuple() == (1.0, 2.0, 4.0, 6.0)

    def test_path_immutable(self):
        """Test that the command sequence is a tuple."""
        path = Path.parse("M 0 0 L 1 1")
        assert isinstance(path.commands, tuple)


class TestLines:
    """Tests for line commands."""

    def test_diagonal_line(self):
        """Test an absolute line."""
        bounds = path_bounds("M 10 20 L 75 100")
        assert bounds.to_tuple() == (10.0, 20.0, 75.0, 100.0)

    def test_relative_diagonal_line(self):
        """Test that a relative line gives the same box as the absolute one."""
        assert path_bounds("M 10 20 l 65 80") == path_bounds("M 10 20 L 75 100")

    @pytest.mark.parametrize("d", ["M 10 20 H 75", "M 10 20 h 65"])
    def test_horizontal_line(self, d):
        """Test that a horizontal line keeps y."""
        assert path_bounds(d).to_tuple() == (10.0, 20.0, 75.0, 20.0)

    @pytest.mark.parametrize("d", ["M 10 20 V 75", "M 10 20 v 55"])
    def test_vertical_line(self, d):
        """Test that a vertical line keeps x."""
        assert path_bounds(d).to_tuple() == (10.0, 20.0, 10.0, 75.0)

    def test_horizontal_then_vertical_uses_pen(self):
        """Test that H and V read the missing coordinate from the pen."""
        bounds = path_bounds("M 10 10 H 50 V 50 H 10 V 10")
        assert bounds.to_tuple() == (10.0, 10.0, 50.0, 50.0)
        assert bounds.last_point == (10.0, 10.0)

    def test_relative_square(self):
        """Test relative horizontal and vertical steps around a square."""
        bounds = path_bounds("M 10 10 h 40 v 40 h -40 v -40")
        assert bounds.to_tuple() == (10.0, 10.0, 50.0, 50.0)


class TestCurves:
    """Tests for curve and arc commands."""

    @pytest.mark.parametrize(
        "d",
        [
            "M 10 20 C 40 25 25 60 50 50",
            "M 10 20 c 30 5 15 40 40 30",
            "M 10 20 S 25 60 50 50",
            "M 10 20 s 15 40 40 30",
            "M 10 20 Q 25 60 50 50",
            "M 10 20 q 15 40 40 30",
            "M 10 20 T 50 50",
            "M 10 20 t 40 30",
            "M 10 20 A 25 25 0 0 0 50 50",
            "M 10 20 a 25 25 0 0 0 40 30",
        ],
    )
    def test_curve_end_point(self, d):
        """Test that curves extend the box to their end point."""
        assert path_bounds(d).to_tuple() == DIAGONAL

    def test_control_points_ignored(self):
        """Test that control points outside the end points do not count."""
        bounds = path_bounds("M 0 0 C 0 -100 100 -100 100 0")
        assert bounds.to_tuple() == (0.0, 0.0, 100.0, 0.0)

    def test_arc_interior_ignored(self):
        """Test that an arc is bounded by its end point only."""
        bounds = path_bounds("M 10 315 A 15 15 0 0 1 40 315")
        assert bounds.to_tuple() == (10.0, 315.0, 40.0, 315.0)


class TestMoveAndClose:
    """Tests for move and close commands."""

    def test_close_the_curve(self):
        """Test that close returns the pen to the first corner."""
        bounds = path_bounds("M 10 20 L 50 50 Z")
        assert bounds.to_tuple() == DIAGONAL
        assert bounds.last_point == (10.0, 20.0)

    def test_lowercase_close(self):
        """Test that z behaves like Z."""
        assert path_bounds("M 10 20 L 50 50 z") == path_bounds("M 10 20 L 50 50 Z")

    def test_first_move_starts_box(self):
        """Test that the first point is not extended from the origin."""
        bounds = path_bounds("M 100 200 L 150 250")
        assert bounds.to_tuple() == (100.0, 200.0, 150.0, 250.0)

    def test_first_command_not_move(self):
        """Test that any first command establishes the box."""
        bounds = path_bounds("L 10 20 L 30 40")
        assert bounds.to_tuple() == (10.0, 20.0, 30.0, 40.0)

    def test_leading_relative_move(self):
        """Test a relative move at the start of a path."""
        bounds = path_bounds("m 10 350 l 40 0 l 20 50")
        assert bounds.to_tuple() == (10.0, 350.0, 70.0, 400.0)

    def test_second_subpath_extends_box(self):
        """Test that a later move grows the box instead of resetting it."""
        bounds = path_bounds("M 50 50 L 10 10 M 0 100")
        assert bounds.to_tuple() == (0.0, 10.0, 50.0, 100.0)
        assert bounds.last_point == (0.0, 100.0)

    def test_relative_move_after_close(self):
        """Test that a relative move after close lands on its own coordinates."""
        bounds = path_bounds("M 10 20 L 50 50 Z m 5 5 l 100 0")
        assert bounds.to_tuple() == (5.0, 5.0, 105.0, 50.0)
        assert bounds.last_point == (105.0, 5.0)

    def test_relative_move_mid_path(self):
        """Test that a lowercase move ignores the current pen."""
        bounds = path_bounds("M 10 10 m 5 5")
        assert bounds.last_point == (5.0, 5.0)
        assert bounds.to_tuple() == (5.0, 5.0, 10.0, 10.0)

    def test_single_move(self):
        """Test a path that only moves."""
        bounds = path_bounds("M 10 20")
        assert bounds.to_tuple() == (10.0, 20.0, 10.0, 20.0)

    def test_empty_path(self):
        """Test that an empty path gives the zero box."""
        assert path_bounds("") == Bounds.empty()


class TestReplay:
    """Tests for replay behaviour and invariants."""

    def test_iter_bounds_intermediate_states(self):
        """Test that every replay step is observable."""
        states = list(Path.parse("M 10 20 L 50 50 Z").iter_bounds())
        assert [s.last_point for s in states] == [(10.0, 20.0), (50.0, 50.0), (10.0, 20.0)]
        assert states[0].to_tuple() == (10.0, 20.0, 10.0, 20.0)
        assert states[-1].to_tuple() == DIAGONAL

    def test_idempotent(self):
        """Test that replaying twice gives identical boxes."""
        path = Path.parse("M 10 20 c 30 5 15 40 40 30 l -60 10 Z")
        assert path.bounds() == path.bounds()
        assert list(path.iter_bounds()) == list(path.iter_bounds())

    @pytest.mark.parametrize(
        "d",
        [
            "M 50 50 L 10 10",
            "M 0 0 l -10 -10 l 30 -5",
            "M 50 50 L 10 10 M 0 100 Z",
            "M 100 0 H -50 V -50 h 10 v 200",
            "M 10 10 c -20 -20 -30 -30 -40 -40 s 5 5 100 100",
        ],
    )
    def test_corners_ordered(self, d):
        """Test that x1 <= x2 and y1 <= y2 for every state."""
        for bounds in Path.parse(d).iter_bounds():
            assert bounds.x1 <= bounds.x2
            assert bounds.y1 <= bounds.y2

    def test_first_tuple_only_by_default(self):
        """Test that only the first tuple of a repeated command is replayed."""
        bounds = path_bounds("M 0 0 L 10 10 20 20")
        assert bounds.to_tuple() == (0.0, 0.0, 10.0, 10.0)
        assert bounds.last_point == (10.0, 10.0)


class TestExpandRepeats:
    """Tests for RepeatMode.EXPAND."""

    def test_line_repetitions(self):
        """Test that every line tuple is replayed."""
        bounds = path_bounds("M 0 0 L 10 10 20 20", RepeatMode.EXPAND)
        assert bounds.to_tuple() == (0.0, 0.0, 20.0, 20.0)
        assert bounds.last_point == (20.0, 20.0)

    def test_relative_repetitions_chain(self):
        """Test that relative tuples are offsets from the previous tuple."""
        bounds = path_bounds("M 0 0 l 10 10 10 10", RepeatMode.EXPAND)
        assert bounds.to_tuple() == (0.0, 0.0, 20.0, 20.0)

    def test_move_repetitions_are_lines(self):
        """Test that extra move tuples act as implicit lines."""
        bounds = path_bounds("M 0 0 10 10 20 5", RepeatMode.EXPAND)
        assert bounds.to_tuple() == (0.0, 0.0, 20.0, 10.0)

    def test_relative_move_repetitions(self):
        """Test that extra relative move tuples act as relative lines."""
        bounds = path_bounds("m 10 10 5 5", RepeatMode.EXPAND)
        assert bounds.to_tuple() == (10.0, 10.0, 15.0, 15.0)

    def test_curve_repetitions(self):
        """Test that each curve tuple contributes its end point."""
        bounds = path_bounds("M 0 0 Q 5 5 10 0 15 -5 20 30", RepeatMode.EXPAND)
        assert bounds.to_tuple() == (0.0, 0.0, 20.0, 30.0)

    def test_one_step_per_tuple(self):
        """Test that each tuple is its own replay step."""
        path = Path.parse("M 0 0 L 1 1 2 2 3 3 Z")
        assert len(list(path.iter_bounds(RepeatMode.EXPAND))) == 5
        assert len(list(path.iter_bounds(RepeatMode.FIRST))) == 3

    def test_partial_tuple(self):
        """Test that a trailing partial tuple is malformed."""
        with pytest.raises(MalformedCommandError) as exc_info:
            path_bounds("M 0 0 L 10 10 20", RepeatMode.EXPAND)

        assert exc_info.value.command == "L"
        assert exc_info.value.index == 3


class TestMalformedCommands:
    """Tests for commands without enough arguments."""

    def test_missing_y(self):
        """Test a line without its y argument."""
        with pytest.raises(MalformedCommandError) as exc_info:
            path_bounds("M 10 20 L 5")

        assert exc_info.value.command == "L"
        assert exc_info.value.index == 1
        assert exc_info.value.position == 8

    def test_short_cubic(self):
        """Test a cubic curve without its end point."""
        with pytest.raises(MalformedCommandError) as exc_info:
            path_bounds("M 0 0 C 1 2 3 4")

        assert exc_info.value.index == 4

    def test_bare_horizontal(self):
        """Test a horizontal line with no argument."""
        with pytest.raises(MalformedCommandError, match="'h'"):
            path_bounds("M 0 0 h")

    def test_short_arc(self):
        """Test an arc missing its end point."""
        with pytest.raises(MalformedCommandError) as exc_info:
            path_bounds("M 0 0 a 25 25 0 0 0 40")

        assert exc_info.value.index == 6

    def test_no_partial_result(self):
        """Test that a malformed command fails the whole path."""
        path = Path.parse("M 0 0 L 10 10 L 5")
        with pytest.raises(MalformedCommandError):
            path.bounds()
