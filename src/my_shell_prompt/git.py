from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging
import os
from .buffer import MAX_LINE_SIZE
from .util import parent_dirs

log = logging.getLogger(__name__)

#: Name of Git's control directory
GIT_DIR = ".git"

#: Name of the file in the control directory that records what is checked out
HEAD_FILE = "HEAD"

#: Contents of ``HEAD`` before the branch name when a local branch is checked
#: out
BRANCH_PREFIX = b"ref: refs/heads/"

#: Number of characters of a detached commit hash to display
SHORT_HASH_LEN = 6


class EntryKind(Enum):
    DIRECTORY = "directory"
    FILE = "regular file"


@dataclass
class GitHead:
    #: Either the name of the current branch or the short form of the current
    #: commit hash
    head: str

    #: `True` iff the repository is in a detached ``HEAD`` state
    detached: bool

    def display(self) -> str:
        if self.detached:
            return self.head
        else:
            return f"On branch: {self.head}"


def parse_head(raw: bytes) -> GitHead:
    """
    Classify the contents of a ``HEAD`` file as either a symbolic reference
    to a local branch or a detached commit hash
    """
    if raw.startswith(BRANCH_PREFIX):
        name = raw[len(BRANCH_PREFIX) :]
        if name.endswith(b"\n"):
            name = name[:-1]
        return GitHead(head=name.decode("utf-8", "replace"), detached=False)
    else:
        short = raw[:SHORT_HASH_LEN].decode("utf-8", "replace")
        return GitHead(head=short, detached=True)


def has_entry(directory: str, name: str, kind: EntryKind) -> bool:
    """
    Return `True` iff ``directory`` has an immediate child named ``name`` of
    the given kind.  Symlinks are not followed.  Raises `OSError` if the
    directory cannot be listed.
    """
    with os.scandir(directory) as it:
        for entry in it:
            if entry.name == name:
                if kind is EntryKind.DIRECTORY:
                    return entry.is_dir(follow_symlinks=False)
                else:
                    return entry.is_file(follow_symlinks=False)
    return False


def git_head(cwd: str) -> GitHead | None:
    """
    Search ``cwd`` and its ancestors (see `parent_dirs()`) for a Git control
    directory and return a description of the ``HEAD`` of the first
    one found.

    If no control directory is found, ``git_head()`` returns `None` without
    logging anything.  If a directory cannot be listed or the first control
    directory found has no readable ``HEAD``, a warning is logged and `None`
    is returned; the search does not continue past the first control
    directory.
    """
    for dirname in parent_dirs(cwd):
        log.debug("Looking for %s in %s", GIT_DIR, dirname)
        try:
            found = has_entry(dirname, GIT_DIR, EntryKind.DIRECTORY)
        except OSError as e:
            log.warning("could not open %s, %s", dirname, e.strerror)
            return None
        if found:
            return read_head(os.path.join(dirname, GIT_DIR))
    log.debug("No %s directory found above %s", GIT_DIR, cwd)
    return None


def read_head(git_dir: str) -> GitHead | None:
    try:
        found = has_entry(git_dir, HEAD_FILE, EntryKind.FILE)
    except OSError as e:
        log.warning("could not open git directory %s, %s", git_dir, e.strerror)
        return None
    if not found:
        log.warning("could not find %s in git directory: %s", HEAD_FILE, git_dir)
        return None
    head_path = os.path.join(git_dir, HEAD_FILE)
    try:
        with open(head_path, "rb") as fp:
            raw = fp.read(MAX_LINE_SIZE)
    except OSError as e:
        log.warning("could not read %s, %s", head_path, e.strerror)
        return None
    head = parse_head(raw)
    log.debug("Read %s from %s", head, head_path)
    return head
