from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Protocol

#: SGR parameter for bold text
BOLD = "1"


class Color(Enum):
    """The eight standard terminal colors, valued by their xterm number"""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7

    @property
    def sgr(self) -> str:
        """The SGR parameter selecting this color for the text"""
        return str(30 + self.value)


@dataclass(frozen=True)
class Style:
    color: Color | None = None
    bold: bool = False

    def sgr_params(self) -> str:
        """
        Return the ``;``-separated SGR parameters for this style (bold first),
        or the empty string for an unstyled `Style`
        """
        params = [BOLD] if self.bold else []
        if self.color is not None:
            params.append(self.color.sgr)
        return ";".join(params)


#: The style of the row glyphs and the footer
DEFAULT_STYLE = Style(Color.MAGENTA, bold=True)


class Styler(Protocol):
    #: Human-readable name of the target, for logging
    name: ClassVar[str]

    def __call__(self, s: str, style: Style) -> str: ...

    def escape(self, s: str) -> str: ...


class ANSIStyler:
    """
    Styles text with bare ANSI escape sequences, as interpreted by the
    terminal when the prompt is printed
    """

    name: ClassVar[str] = "ansi"

    def __call__(self, s: str, style: Style) -> str:
        if params := style.sgr_params():
            return f"\x1B[{params}m{s}\x1B[0m"
        return s

    def escape(self, s: str) -> str:
        return s


class BashStyler:
    r"""
    Styles text for Bash's ``PS1``.  Escape sequences are enclosed in ``\[``
    and ``\]`` so that Bash leaves them out when measuring the prompt, and
    backslashes in the text itself are doubled.
    """

    name: ClassVar[str] = "bash"

    def __call__(self, s: str, style: Style) -> str:
        s = self.escape(s)
        if params := style.sgr_params():
            return rf"\[\e[{params}m\]{s}\[\e[0m\]"
        return s

    def escape(self, s: str) -> str:
        return s.replace("\\", r"\\")


class ZshStyler:
    """
    Styles text for zsh's ``PS1`` using its own ``%B`` and ``%F{n}`` prompt
    sequences.  Literal percent signs in the text are doubled.
    """

    name: ClassVar[str] = "zsh"

    def __call__(self, s: str, style: Style) -> str:
        s = self.escape(s)
        if style.bold:
            s = "%B" + s + "%b"
        if style.color is not None:
            s = "%F{" + str(style.color.value) + "}" + s + "%f"
        return s

    def escape(self, s: str) -> str:
        return s.replace("%", "%%")


@dataclass
class Painter:
    """Applies one fixed style through a styler"""

    styler: Styler
    style: Style = DEFAULT_STYLE

    def __call__(self, s: str) -> str:
        return self.styler(s, self.style)

    def escape(self, s: str) -> str:
        return self.styler.escape(s)
