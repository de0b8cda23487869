# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Read-only, seekable stream over a fully buffered request body."""

from __future__ import annotations

from typing import Any

from .errors import NotWritableError, SeekOutOfRangeError
from .interface import StreamInterface, Whence
from .source import RawContentSource


class BufferStream(StreamInterface):
    """Stream view of a request body that was pulled into memory up front.

    The body is read from `source` exactly once, at construction. A falsy
    answer from the source means "no body" and yields empty content. After
    that the source is only kept so `detach` can hand it back.

    The cursor always satisfies ``0 <= tell() <= get_size()``. `read` and
    `get_contents` shorten their result at the end of the content instead of
    failing; only `seek` raises on out-of-range positions.
    """

    def __init__(self, source: RawContentSource):
        self._source = source
        raw = source.raw_content()
        self._content: bytes = bytes(raw) if raw else b""
        self._pos = 0

    def read(self, length: int) -> bytes:
        """Return up to `length` bytes and advance the cursor past them."""
        if length < 0:
            raise ValueError("length must be non-negative")
        end = min(self._pos + length, len(self._content))
        chunk = self._content[self._pos : end]
        self._pos = end
        return chunk

    def get_contents(self) -> bytes:
        """Return the unread remainder and move the cursor to the end."""
        return self.read(len(self._content) - self._pos)

    def to_string(self) -> bytes:
        """Return the full body, wherever the cursor is."""
        return self._content

    def get_size(self) -> int:
        return len(self._content)

    def tell(self) -> int:
        return self._pos

    def eof(self) -> bool:
        return self._pos == len(self._content)

    def is_seekable(self) -> bool:
        return True

    def is_readable(self) -> bool:
        return True

    def is_writable(self) -> bool:
        return False

    def seek(self, offset: int, whence: int = Whence.START) -> int:
        """Move the cursor and return its new value.

        START and CURRENT targets must land strictly before the end of the
        content, so an absolute seek can never reach `get_size()` itself.
        END offsets must be negative.

        Raises:
            SeekOutOfRangeError: If the target is outside the allowed range.
            ValueError: If `whence` is not a known reference point.
        """
        try:
            whence = Whence(whence)
        except ValueError as error:
            raise ValueError(f"unsupported whence: {whence!r}") from error

        size = len(self._content)
        if whence is Whence.START:
            if offset >= size:
                raise SeekOutOfRangeError("offset must be less than content length")
            target = offset
        elif whence is Whence.CURRENT:
            target = self._pos + offset
            if target >= size:
                raise SeekOutOfRangeError(
                    "offset plus current position must be less than content length"
                )
        else:
            if offset >= 0:
                raise SeekOutOfRangeError("offset must be negative")
            target = size + offset

        if target < 0:
            raise SeekOutOfRangeError("offset must not move before the start of content")
        self._pos = target
        return self._pos

    def rewind(self) -> None:
        """Move the cursor back to 0. Never fails, even on an empty body."""
        self._pos = 0

    def write(self, data: bytes) -> int:
        raise NotWritableError("stream is not writable")

    def get_metadata(self, key: str | None = None) -> Any:
        """No metadata is tracked: `{}` for the full mapping, `None` per key."""
        if key is None:
            return {}
        return None

    def detach(self) -> RawContentSource:
        """Return the source the body was read from. Stream state is untouched."""
        return self._source

    def close(self) -> None:
        return None

    def __bytes__(self) -> bytes:
        return self.to_string()

    def __str__(self) -> str:
        return self._content.decode("utf-8", errors="replace")

    def __len__(self) -> int:
        return len(self._content)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._content)}, pos={self._pos})"
