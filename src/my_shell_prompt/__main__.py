from __future__ import annotations
import argparse
import logging
import sys
from . import __version__
from .info import PromptInfo
from .styles import ANSIStyler, BashStyler, Color, Painter, Style, ZshStyler

log = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="my-shell-prompt",
        description="A multi-line, git-aware bash/zsh prompt",
    )
    parser.add_argument(
        "--ansi",
        action="store_const",
        dest="stylecls",
        const=ANSIStyler,
        help="Format prompt with raw ANSI escapes (default)",
    )
    parser.add_argument(
        "--bash",
        action="store_const",
        dest="stylecls",
        const=BashStyler,
        help="Format prompt for Bash's PS1",
    )
    parser.add_argument(
        "-c",
        "--color",
        choices=[c.name.lower() for c in Color],
        default="magenta",
        help="Select the color of the prompt decorations  [default: magenta]",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log the Git repository search to stderr",
    )
    parser.add_argument(
        "--zsh",
        action="store_const",
        dest="stylecls",
        const=ZshStyler,
        help="Format prompt for zsh's PS1",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "git_flag", nargs="?", help='Set to "off" to disable Git integration'
    )
    args = parser.parse_args(argv)
    logging.basicConfig(
        format="my-shell-prompt: %(message)s",
        level=logging.DEBUG if args.debug else logging.WARNING,
    )
    styler = (args.stylecls or ANSIStyler)()
    log.debug("Rendering prompt for %s", styler.name)
    paint = Painter(styler=styler, style=Style(Color[args.color.upper()], bold=True))
    info = PromptInfo.get(git=args.git_flag != "off")
    sys.stdout.buffer.write(info.render(paint))
    sys.stdout.flush()


if __name__ == "__main__":
    main()
