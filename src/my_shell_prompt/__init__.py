"""
A multi-line, git-aware shell prompt

``my-shell-prompt`` prints a decorated, multi-line prompt string for use as
Bash's or zsh's ``PS1``.  It is invoked afresh for every prompt and reads
nothing but the environment and the filesystem.

Features:

- Shows the active Python virtual environment
- Shows the user, platform, and current directory name
- Shows the full working directory when it is deeply nested
- Shows the current Git branch (or detached commit) without running ``git``
- Shows the current shell
- Supports raw ANSI output as well as Bash and zsh prompt escaping
"""

__version__ = "0.1.0"
__license__ = "MIT"
