from __future__ import annotations
import pytest
from my_shell_prompt.util import basename, count_segments, find_next_dir, parent_dirs


@pytest.mark.parametrize(
    "path,index,result",
    [
        ("/a/b/c", 6, 4),
        ("/a/b/c", 4, 2),
        ("/a/b/c", 2, 0),
        ("/a/b/c", 0, 0),
        ("/usr/local/lib", 14, 10),
        ("/usr/local/lib", 10, 4),
        ("relative", 8, 0),
        ("a/b", 3, 1),
        ("/", 1, 0),
    ],
)
def test_find_next_dir(path: str, index: int, result: int) -> None:
    assert find_next_dir(path, index) == result


@pytest.mark.parametrize(
    "path",
    ["/", "/a", "/a/b/c", "/usr/local/lib/python3", "/home/user/.venvs/myproj"],
)
def test_find_next_dir_reaches_root(path: str) -> None:
    i = len(path)
    for _ in range(path.count("/")):
        i = find_next_dir(path, i)
    assert i == 0
    assert find_next_dir(path, i) == 0


@pytest.mark.parametrize(
    "path,count",
    [
        ("/", 1),
        ("/a", 1),
        ("/a/b/c", 3),
        ("/a/b/c/d", 4),
        ("/a/b/c/d/e", 5),
        ("/a/b/c/d/e/f", 6),
    ],
)
def test_count_segments(path: str, count: int) -> None:
    assert count_segments(path) == count


@pytest.mark.parametrize(
    "path,base",
    [
        ("/home/user/.venvs/myproj", "myproj"),
        ("/a", "a"),
        ("/", ""),
        ("a/b", "b"),
        ("myproj", "myproj"),
    ],
)
def test_basename(path: str, base: str) -> None:
    assert basename(path) == base


@pytest.mark.parametrize(
    "path,parents",
    [
        ("/a/b/c", ["/a/b/c", "/a/b", "/a"]),
        ("/home", ["/home"]),
        ("/", ["/"]),
        ("", []),
    ],
)
def test_parent_dirs(path: str, parents: list[str]) -> None:
    assert list(parent_dirs(path)) == parents
