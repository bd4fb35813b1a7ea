from __future__ import annotations
from collections.abc import Iterator

PATH_SEP = "/"


def find_next_dir(path: str, index: int) -> int:
    """
    Return the position of the nearest path separator in ``path`` strictly
    before ``index``, or 0 if there is none.  Calling this repeatedly starting
    from ``len(path)`` visits the separators of ``path`` from right to left
    and then stays at 0.
    """
    if index == 0:
        return 0
    i = index - 1
    while i > 0 and path[i] != PATH_SEP:
        i -= 1
    return i


def count_segments(path: str) -> int:
    """Return the number of separator-delimited segments in ``path``"""
    count = 0
    i = len(path)
    while i > 0:
        count += 1
        i = find_next_dir(path, i)
    return count


def basename(path: str) -> str:
    """Return the final segment of ``path``"""
    i = find_next_dir(path, len(path))
    if i == 0 and not path.startswith(PATH_SEP):
        return path
    return path[i + 1 :]


def parent_dirs(path: str) -> Iterator[str]:
    """
    Yield ``path`` followed by each of its ancestors.  The filesystem root is
    only yielded if ``path`` is the root itself.
    """
    i = len(path)
    while i > 0:
        yield path[:i]
        i = find_next_dir(path, i)
