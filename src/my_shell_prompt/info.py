from __future__ import annotations
from dataclasses import dataclass
import os
import sys
from .buffer import PromptBuffer
from .git import GitHead, git_head
from .prompt import add_bottom_row, add_prompt_char, add_row_to_prompt
from .styles import Painter
from .util import basename, count_segments, find_next_dir

#: The user shown in the user/host/directory row
USER_NAME = "JJ"

#: The conventional directory of shell binaries; this many leading characters
#: are dropped from :envvar:`SHELL`
SHELL_PREFIX = "/bin/"

#: Minimum number of path segments for the full working directory to be shown
LONG_CWD_SEGMENTS = 5


def get_platform() -> str:
    """Return a short tag for the operating system we're running on"""
    if sys.platform == "darwin":
        return "mac"
    elif sys.platform in ("win32", "cygwin"):
        return "win"
    elif sys.platform.startswith("linux"):
        return "linux"
    else:
        return "unknown"


PLATFORM = get_platform()


@dataclass
class PromptInfo:
    #: The path to the active Python virtualenv (if any)
    virtual_env: str | None

    #: The path to the current working directory, taken from :envvar:`PWD`
    #: (if set)
    cwd: str | None

    #: The path to the user's shell (if set)
    shell: str | None

    git: GitHead | None

    @classmethod
    def get(cls, git: bool = True) -> PromptInfo:
        cwd = os.environ.get("PWD")
        if git and cwd is not None:
            gh = git_head(cwd)
        else:
            gh = None
        return cls(
            virtual_env=os.environ.get("VIRTUAL_ENV"),
            cwd=cwd,
            shell=os.environ.get("SHELL"),
            git=gh,
        )

    def rows(self) -> list[str]:
        """Return the rows of the prompt, top to bottom, without decoration"""
        rows = []
        if self.virtual_env is not None:
            rows.append(venv_row(self.virtual_env))
        if self.cwd is not None:
            rows.append(host_row(self.cwd))
            if (r := long_cwd_row(self.cwd)) is not None:
                rows.append(r)
        if self.git is not None:
            rows.append(self.git.display())
        if self.shell is not None and (r := shell_row(self.shell)) is not None:
            rows.append(r)
        return rows

    def build(self, paint: Painter) -> PromptBuffer:
        buffer = PromptBuffer()
        for row in self.rows():
            add_row_to_prompt(buffer, row, paint)
        add_bottom_row(buffer, paint)
        add_prompt_char(buffer, paint)
        return buffer

    def display(self, paint: Painter) -> str:
        """
        Construct & return a complete prompt string for the current environment
        """
        return self.build(paint).getvalue()

    def render(self, paint: Painter) -> bytes:
        """
        Construct the complete prompt and return it as the bytes to write to
        the terminal.  Path components that were not valid in the filesystem
        encoding come out byte-for-byte as they were in the environment.
        """
        return self.build(paint).getbytes()


def venv_row(virtual_env: str) -> str:
    return f"Py env: {basename(virtual_env)}"


def host_row(cwd: str) -> str:
    return f"{USER_NAME}@{PLATFORM} in {basename(cwd)}"


def long_cwd_row(cwd: str) -> str | None:
    """
    If ``cwd`` is deeply nested, return a row showing the path with its first
    segment removed; otherwise, return `None`
    """
    if count_segments(cwd) < LONG_CWD_SEGMENTS:
        return None
    # Walk back to the boundary just after the first segment
    start = len(cwd)
    while (i := find_next_dir(cwd, start)) > 0:
        start = i
    return f"pwd: {cwd[start + 1 :]}"


def shell_row(shell: str) -> str | None:
    if len(shell) < len(SHELL_PREFIX):
        return None
    return f"Using {shell[len(SHELL_PREFIX) :]}"
