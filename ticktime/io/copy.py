"""Buffered copying of a byte count from one binary stream to another.

CopyHelper owns one reusable buffer and moves data with readinto(), so a
copy of any size allocates nothing beyond that buffer.
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Callable

from ticktime.config import get_settings
from ticktime.errors import IoError

logger = logging.getLogger(__name__)


class CopyHelper:
    """Copies bytes between binary streams through a fixed-size buffer.

    Examples:
        >>> import io
        >>> source, target = io.BytesIO(b"abcdef"), io.BytesIO()
        >>> CopyHelper(4).copy(source, target, 5)
        >>> target.getvalue()
        b'abcde'
    """

    __slots__ = ("_buffer",)

    def __init__(self, buffer_size: int | None = None) -> None:
        """Create a copy helper.

        Args:
            buffer_size: Size of the copy buffer in bytes. Defaults to the
                configured copy_buffer_size.

        Raises:
            ValueError: If buffer_size is not positive.
        """
        if buffer_size is None:
            buffer_size = get_settings().copy_buffer_size
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._buffer = memoryview(bytearray(buffer_size))

    @property
    def buffer_size(self) -> int:
        return len(self._buffer)

    def copy(self, input: BinaryIO, output: BinaryIO, count: int) -> None:
        """Copy count bytes from input to output.

        Raises:
            IoError: If input ends before count bytes were read.
        """
        while count > 0:
            count -= self._transfer(input, output, min(count, len(self._buffer)))

    def callback_copy(
        self,
        input: BinaryIO,
        output: BinaryIO,
        count: int,
        is_aborted: Callable[[], bool],
        callback: Callable[[float], None],
    ) -> None:
        """Copy count bytes from input to output, reporting progress.

        After every full buffer the copy stops if is_aborted() returns True;
        otherwise callback receives the fraction copied so far. callback(1.0)
        is called once the copy completes.

        Raises:
            IoError: If input ends before count bytes were read.
        """
        total = count
        buffer_size = len(self._buffer)
        while count > buffer_size:
            count -= self._transfer(input, output, buffer_size)
            if is_aborted():
                logger.debug("copy aborted after %d of %d bytes", total - count, total)
                return
            callback((total - count) / total)
        while count > 0:
            count -= self._transfer(input, output, count)
        callback(1.0)

    def _transfer(self, input: BinaryIO, output: BinaryIO, size: int) -> int:
        chunk = self._buffer[:size]
        read = input.readinto(chunk)
        if not read:
            raise IoError(f"unexpected end of stream, {size} more bytes expected")
        output.write(chunk[:read])
        return read


__all__ = ["CopyHelper"]
