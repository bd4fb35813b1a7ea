from __future__ import annotations
import os
from my_shell_prompt.buffer import BUF_SIZE, PromptBuffer


def test_append() -> None:
    buf = PromptBuffer(capacity=10)
    assert buf.append("12345")
    assert buf.append("1234")
    assert len(buf) == 9
    assert buf.getvalue() == "123451234"


def test_append_overflow_is_noop() -> None:
    buf = PromptBuffer(capacity=10)
    assert buf.append("12345")
    assert not buf.append("12345")
    assert len(buf) == 5
    assert buf.getvalue() == "12345"
    assert not buf.append("x" * 100)
    assert buf.getvalue() == "12345"


def test_capacity_counts_bytes() -> None:
    buf = PromptBuffer(capacity=4)
    assert buf.append("℁")
    assert len(buf) == 3
    assert not buf.append("x")
    assert buf.getvalue() == "℁"


def test_default_capacity() -> None:
    buf = PromptBuffer()
    assert not buf.append("x" * BUF_SIZE)
    assert buf.append("x" * (BUF_SIZE - 1))
    assert not buf.append("x")
    assert len(buf) == BUF_SIZE - 1


def test_getbytes() -> None:
    buf = PromptBuffer()
    buf.append("℁ ")
    buf.append(os.fsdecode(b"caf\xe9"))
    assert buf.getbytes() == "℁ ".encode("utf-8") + b"caf\xe9"
    assert len(buf) == len(buf.getbytes())
