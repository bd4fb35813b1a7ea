from __future__ import annotations

#: Maximum size in bytes of the complete prompt
BUF_SIZE = 4096

#: Maximum size in bytes of a single prompt row, and of a file read while
#: probing
MAX_LINE_SIZE = 1024


class PromptBuffer:
    """
    A fixed-capacity, append-only text buffer.  Text is stored UTF-8-encoded,
    with undecodable filesystem bytes (surrogate escapes) restored as-is, and
    the capacity is measured in bytes.  One byte of the capacity is always
    kept free, so the buffer never holds more than ``capacity - 1`` bytes.
    """

    def __init__(self, capacity: int = BUF_SIZE) -> None:
        self.capacity = capacity
        self._data = bytearray()

    def __len__(self) -> int:
        return len(self._data)

    def fits(self, size: int) -> bool:
        """Return `True` iff ``size`` more bytes can be appended"""
        return len(self._data) + size < self.capacity

    def append(self, content: str) -> bool:
        """
        Append ``content`` to the buffer if the whole of it fits, and return
        `True`.  If it does not fit, leave the buffer unchanged and return
        `False`.
        """
        data = encode(content)
        if not self.fits(len(data)):
            return False
        self._data += data
        return True

    def getvalue(self) -> str:
        return self._data.decode("utf-8", "surrogateescape")

    def getbytes(self) -> bytes:
        return bytes(self._data)


def encode(s: str) -> bytes:
    """Encode ``s`` the way `PromptBuffer` stores it"""
    return s.encode("utf-8", "surrogateescape")
