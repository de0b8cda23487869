# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial

"""Seekable, read-only streams over fully buffered HTTP request bodies."""

from .buffer_stream import BufferStream
from .errors import NotWritableError, SeekOutOfRangeError, StreamError
from .interface import StreamInterface, Whence
from .source import FileRequest, RawContentSource, StaticRequest

__all__ = [
    "BufferStream",
    "FileRequest",
    "NotWritableError",
    "RawContentSource",
    "SeekOutOfRangeError",
    "StaticRequest",
    "StreamError",
    "StreamInterface",
    "Whence",
]
