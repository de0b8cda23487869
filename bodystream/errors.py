# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Exception types raised by request-body streams."""

from __future__ import annotations


class StreamError(RuntimeError):
    """Base exception for stream failures."""


class SeekOutOfRangeError(StreamError):
    """Raised when a seek would move the cursor outside the buffered content."""


class NotWritableError(StreamError):
    """Raised on any write attempt against a read-only stream."""
