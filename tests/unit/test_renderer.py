"""
Unit tests for the report renderer.
"""

import io

import pytest
from rich.console import Console

from hashcheck.diagnostics import (
    PlainStyler,
    RenderConfig,
    ReportRenderer,
    RichStyler,
    SourcePosition,
    ValidationError,
)

SERVICE_LINES = [
    "server:",
    "  host: localhost",
    "  port: eight",
    "  debug: true",
]


def make_renderer(config=None, styler=None, width=200):
    """Create a renderer writing to an in-memory console."""
    console = Console(file=io.StringIO(), width=width, color_system=None)
    return ReportRenderer(console=console, styler=styler or PlainStyler(), config=config)


def rendered_text(renderer):
    return renderer.console.file.getvalue()


class TestFormatError:
    """Test the formatted lines of a single error."""

    def test_single_error_line(self):
        """Test header, context lines, marker and pointer."""
        error = ValidationError("002", "'eight' is not of type 'integer'", (SourcePosition(3, 9, 14),))

        lines = make_renderer().format_error(error, SERVICE_LINES, "config.yaml")

        assert lines == [
            "Error HM002 config.yaml:3:9 'eight' is not of type 'integer'",
            "  1 │ server:",
            "  2 │   host: localhost",
            "> 3 │   port: eight",
            "    │         ^^^^^",
            "  4 │   debug: true",
            "",
        ]

    def test_distant_lines_render_two_groups(self):
        """Test group separator and the shared gutter width."""
        source = [f"line {n}" for n in range(1, 13)]
        error = ValidationError(
            "004",
            "unexpected keys",
            (SourcePosition(10, 3, 5), SourcePosition(1, 1, 2))
        )

        lines = make_renderer().format_error(error, source, "doc.yaml")

        assert lines == [
            "Error HM004 doc.yaml:1:1 unexpected keys",
            ">  1 │ line 1",
            "     │ ^",
            "   2 │ line 2",
            "   3 │ line 3",
            "",
            "   ⋮ │",
            "",
            "   8 │ line 8",
            "   9 │ line 9",
            "> 10 │ line 10",
            "     │ ^",
            "  11 │ line 11",
            "  12 │ line 12",
            "",
        ]

    def test_pointer_uses_first_position_on_every_line(self):
        """Test every error line is underlined with the first position's columns."""
        source = ["aaaa", "bbbbbbbb"]
        error = ValidationError(
            "099",
            "two spans",
            (SourcePosition(2, 5, 8), SourcePosition(1, 2, 4))
        )

        lines = make_renderer().format_error(error, source, "f")

        pointers = [line for line in lines if line.strip().startswith("│")]
        assert pointers == ["    │  ^^", "    │  ^^"]

    def test_nearby_lines_share_one_group(self):
        """Test lines within the context radius render without separator."""
        source = [f"row {n}" for n in range(1, 8)]
        error = ValidationError("005", "bad", (SourcePosition(2, 1, 4), SourcePosition(4, 1, 4)))

        lines = make_renderer().format_error(error, source, "f")

        assert not any("⋮" in line for line in lines)
        assert sum(1 for line in lines if line.startswith(">")) == 2
        # Window is 1..6
        assert lines[1].endswith("row 1")
        assert lines[-2].endswith("row 6")

    def test_leading_tab_shifts_pointer(self):
        """Test the pointer lines up with tab-expanded text."""
        source = ["\tname: x"]
        error = ValidationError("002", "bad", (SourcePosition(1, 1, 5),))

        lines = make_renderer().format_error(error, source, "f")

        assert lines[1] == "> 1 │     name: x"
        # Raw 1..5 maps to display 4..8
        assert lines[2] == "    │    ^^^^"

    def test_custom_config(self):
        """Test context size and tab size come from the configuration."""
        source = ["a", "b", "\tc", "d", "e"]
        error = ValidationError("002", "bad", (SourcePosition(3, 2, 3),))
        config = RenderConfig(context_size=0, tab_size=2)

        lines = make_renderer(config=config).format_error(error, source, "f")

        assert lines == [
            "Error HM002 f:3:2 bad",
            "> 3 │   c",
            "    │   ^",
            "",
        ]

    def test_error_past_document_end_is_clipped(self):
        """Test lines beyond the document are not displayed."""
        error = ValidationError("002", "bad", (SourcePosition(9, 1, 2),))

        lines = make_renderer().format_error(error, ["only line"], "f")

        assert lines == ["Error HM002 f:9:1 bad", ""]

    def test_error_without_positions(self):
        """Test an error without positions still renders its header."""
        error = ValidationError("099", "no location", ())

        lines = make_renderer().format_error(error, SERVICE_LINES, "config.yaml")

        assert lines == ["Error HM099 config.yaml no location", ""]


class TestRender:
    """Test console output."""

    def test_no_errors_prints_nothing(self):
        """Test an empty error list emits no output."""
        renderer = make_renderer()

        renderer.render([], SERVICE_LINES, "config.yaml")

        assert rendered_text(renderer) == ""

    def test_errors_printed_in_order(self):
        """Test errors are emitted in the order given."""
        renderer = make_renderer()
        errors = [
            ValidationError("010", "second in file", (SourcePosition(4, 3, 8),)),
            ValidationError("002", "first in file", (SourcePosition(1, 1, 7),)),
        ]

        renderer.render(errors, SERVICE_LINES, "config.yaml")

        output = rendered_text(renderer)
        assert output.index("HM010") < output.index("HM002")

    def test_rich_styler_output_without_color(self):
        """Test markup is consumed and source text is kept literally."""
        renderer = make_renderer(styler=RichStyler())
        source = ["tags: [bold]", "emoji: :smile:"]
        error = ValidationError("002", "expected [list]", (SourcePosition(1, 7, 13),))

        renderer.render([error], source, "doc.yaml")

        output = rendered_text(renderer)
        assert "Error HM002 doc.yaml:1:7 expected [list]" in output
        assert "> 1 │ tags: [bold]" in output
        assert "emoji: :smile:" in output
        assert "[/" not in output

    def test_rich_styler_emits_ansi_on_terminal(self):
        """Test colored output on a color terminal."""
        console = Console(file=io.StringIO(), width=200, force_terminal=True, color_system="standard")
        renderer = ReportRenderer(console=console, styler=RichStyler())
        error = ValidationError("002", "bad", (SourcePosition(1, 1, 3),))

        renderer.render([error], ["ab"], "f")

        assert "\x1b[" in console.file.getvalue()

    def test_long_lines_are_not_wrapped(self):
        """Test source lines wider than the console stay on one line."""
        renderer = make_renderer(width=20)
        long_line = "key: " + "x" * 60
        error = ValidationError("009", "too long", (SourcePosition(1, 6, 66),))

        renderer.render([error], [long_line], "f")

        assert f"> 1 │ {long_line}" in rendered_text(renderer).splitlines()


class TestStylers:
    """Test styling capabilities."""

    def test_plain_styler_is_identity(self):
        """Test plain styling leaves text alone."""
        styler = PlainStyler()
        assert styler.bold("x") == "x"
        assert styler.colored("x", "link") == "x"
        assert styler.literal("[x]") == "[x]"

    def test_rich_styler_markup(self):
        """Test Rich markup for bold and roles."""
        styler = RichStyler()
        assert styler.bold("x") == "[bold]x[/bold]"
        assert styler.colored("x", "error") == "[bright_red]x[/bright_red]"
        assert styler.colored("x", "gutter") == "[bright_black]x[/bright_black]"

    def test_rich_styler_escapes_literal(self):
        """Test raw text cannot open markup tags."""
        assert RichStyler().literal("[red]") == "\\[red]"

    @pytest.mark.parametrize("styler", [PlainStyler(), RichStyler()])
    def test_unknown_role_rejected(self, styler):
        """Test roles outside the fixed scheme are rejected."""
        with pytest.raises(ValueError):
            styler.colored("x", "warning")
