from typing import Optional


class ByteCursor:
    """Forward-only, single-pass reader over an in-memory byte buffer."""

    def __init__(self, data: bytes):
        self._data = bytes(data)
        self._position = 0

    @property
    def position(self) -> int:
        """Number of bytes consumed so far."""
        return self._position

    def next_byte(self) -> Optional[int]:
        """
        Return the next unread byte and advance, or None once exhausted.

        Exhaustion is not an error here; the caller decides what it means.
        """
        if self._position >= len(self._data):
            return None
        value = self._data[self._position]
        self._position += 1
        return value
