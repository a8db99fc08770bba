"""
Terminal styling used by the report renderer.

The renderer only asks for roles ("error", "link", "gutter", "success") and
bold text; a Styler decides what that looks like. RichStyler emits Rich console
markup, PlainStyler emits the text untouched (for --no-color and tests).

Example:
    ```python
    from hashcheck.diagnostics.styles import RichStyler

    styler = RichStyler()
    styler.bold(styler.colored("Error", "error"))
    # '[bold][bright_red]Error[/bright_red][/bold]'
    ```
"""

from typing import Dict

from rich.markup import escape
from typing_extensions import Protocol

ROLES = ("error", "link", "gutter", "success")


class Styler(Protocol):
    """Styling capability consumed by the renderer."""

    #: Whether the console must interpret the produced strings as markup
    markup: bool

    def bold(self, text: str) -> str:
        ...

    def colored(self, text: str, role: str) -> str:
        ...

    def literal(self, text: str) -> str:
        """Make raw source or message text safe to embed in styled output."""
        ...


def _check_role(role: str) -> None:
    if role not in ROLES:
        raise ValueError(f"Unknown style role: {role!r} (expected one of {', '.join(ROLES)})")


class RichStyler:
    """Styler producing Rich console markup."""

    markup = True

    COLORS: Dict[str, str] = {
        "error": "bright_red",
        "link": "bright_blue",
        "gutter": "bright_black",
        "success": "green",
    }

    def bold(self, text: str) -> str:
        return f"[bold]{text}[/bold]"

    def colored(self, text: str, role: str) -> str:
        _check_role(role)
        color = self.COLORS[role]
        return f"[{color}]{text}[/{color}]"

    def literal(self, text: str) -> str:
        return escape(text)


class PlainStyler:
    """Styler that leaves text unchanged."""

    markup = False

    def bold(self, text: str) -> str:
        return text

    def colored(self, text: str, role: str) -> str:
        _check_role(role)
        return text

    def literal(self, text: str) -> str:
        return text
