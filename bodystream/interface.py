# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Stream contract shared by request-body streams.

Intent:
  - Give consumers one surface for reading, positioning and inspecting a body.
  - Keep capability queries explicit (`is_readable`, `is_writable`, ...) so
    callers check before they act instead of catching errors.

Defined here:
  - Whence: reference point for a seek offset.
  - StreamInterface: abstract base listing every stream operation.
"""

from __future__ import annotations

import io
from enum import IntEnum
from typing import Any


class Whence(IntEnum):
    """Reference point for `seek`.

    Values match `io.SEEK_SET`, `io.SEEK_CUR` and `io.SEEK_END`, so plain
    integers from the io module are accepted wherever a Whence is expected.
    """

    START = io.SEEK_SET
    CURRENT = io.SEEK_CUR
    END = io.SEEK_END


class StreamInterface:
    """Abstract byte stream.

    Subclasses implement every hook below. The base class only provides the
    context-manager protocol, which closes the stream on exit.
    """

    def read(self, length: int) -> bytes:  # pragma: no cover - base hook
        """Return up to `length` bytes from the cursor and advance it."""
        raise NotImplementedError

    def get_contents(self) -> bytes:  # pragma: no cover - base hook
        """Return everything from the cursor to the end and advance to the end."""
        raise NotImplementedError

    def to_string(self) -> bytes:  # pragma: no cover - base hook
        """Return the whole stream content without moving the cursor."""
        raise NotImplementedError

    def get_size(self) -> int | None:  # pragma: no cover - base hook
        raise NotImplementedError

    def tell(self) -> int:  # pragma: no cover - base hook
        raise NotImplementedError

    def eof(self) -> bool:  # pragma: no cover - base hook
        raise NotImplementedError

    def is_seekable(self) -> bool:  # pragma: no cover - base hook
        raise NotImplementedError

    def is_readable(self) -> bool:  # pragma: no cover - base hook
        raise NotImplementedError

    def is_writable(self) -> bool:  # pragma: no cover - base hook
        raise NotImplementedError

    def seek(self, offset: int, whence: int = Whence.START) -> int:  # pragma: no cover - base hook
        """Move the cursor relative to `whence`.

        Raises:
            SeekOutOfRangeError: If the target position is outside the content.
        """
        raise NotImplementedError

    def rewind(self) -> None:  # pragma: no cover - base hook
        raise NotImplementedError

    def write(self, data: bytes) -> int:  # pragma: no cover - base hook
        raise NotImplementedError

    def get_metadata(self, key: str | None = None) -> Any:  # pragma: no cover - base hook
        raise NotImplementedError

    def detach(self) -> object:  # pragma: no cover - base hook
        """Hand the underlying resource back to the caller."""
        raise NotImplementedError

    def close(self) -> None:  # pragma: no cover - base hook
        raise NotImplementedError

    def __enter__(self) -> StreamInterface:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
