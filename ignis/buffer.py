"""A resizable block of raw bytes that can be released explicitly."""

from __future__ import annotations

from types import TracebackType

__all__ = ["Buffer"]


class Buffer:
    """Owns a block of bytes, or nothing once released.

    A buffer is built from an existing bytes-like object (its contents are
    taken over as a mutable copy), from a size (a zero-filled block of that
    many bytes), or from nothing (an empty, unallocated buffer). Used as a
    context manager it releases its memory on exit.
    """

    __slots__ = ("_data",)

    def __init__(self, data: bytes | bytearray | memoryview | int | None = None) -> None:
        self._data: bytearray | None = None
        if data is None:
            return
        if isinstance(data, bool):
            raise TypeError("buffer data must be bytes-like or a size, not bool")
        if isinstance(data, int):
            self.allocate(data)
        elif isinstance(data, (bytes, bytearray, memoryview)):
            self._data = bytearray(data)
        else:
            raise TypeError(
                f"buffer data must be bytes-like or a size, not {type(data).__name__}"
            )

    @property
    def data(self) -> bytearray | None:
        """The bytes held, or None when nothing is allocated."""
        return self._data

    @property
    def size(self) -> int:
        """Number of bytes held."""
        return len(self._data) if self._data is not None else 0

    def allocate(self, size: int) -> None:
        """Drop the current contents and hold ``size`` zeroed bytes."""
        if not isinstance(size, int) or isinstance(size, bool):
            raise TypeError(f"size must be an int, not {type(size).__name__}")
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self.release()
        self._data = bytearray(size)

    def release(self) -> None:
        """Free the contents; the buffer becomes empty and falsy."""
        self._data = None

    def copy(self) -> Buffer:
        """Return an independent buffer with the same contents."""
        result = Buffer()
        if self._data is not None:
            result._data = bytearray(self._data)
        return result

    def __bool__(self) -> bool:
        return self._data is not None

    def __len__(self) -> int:
        return self.size

    def __bytes__(self) -> bytes:
        return bytes(self._data) if self._data is not None else b""

    def __enter__(self) -> Buffer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()

    def __repr__(self) -> str:
        state = f"size={self.size}" if self else "released"
        return f"Buffer({state})"