"""# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial"""
from __future__ import annotations

"""Raw request-body providers consumed by `BufferStream`.

A source answers one question, once: "give me all the body bytes now". It
returns the bytes, or a falsy sentinel (`None`, `False`, `b""`) when the
request carries no body.
"""

import os
import urllib.parse
import urllib.request
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class RawContentSource(Protocol):
    """Anything that can hand over a complete request body in one call."""

    def raw_content(self) -> bytes | bool | None:
        ...


@dataclass
class StaticRequest:
    """Request whose body is already held in memory.

    `str` bodies are encoded as UTF-8; `None` means "no body".
    """

    body: bytes | str | None = None

    def raw_content(self) -> bytes | None:
        if self.body is None:
            return None
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return bytes(self.body)


@dataclass
class FileRequest:
    """Request whose body is stored in a local file (plain path or file:// URI).

    The file is read when `raw_content` is called, up to `max_bytes` when set.
    An empty file reports no body.
    """

    uri: str
    max_bytes: int | None = None

    def _path(self) -> str:
        if self.uri.startswith("file://"):
            parsed = urllib.parse.urlparse(self.uri)
            return urllib.request.url2pathname(parsed.path)
        return self.uri

    def raw_content(self) -> bytes | None:
        path = self._path()
        if not os.path.isfile(path):
            raise FileNotFoundError(f"resource does not exist: {self.uri}")
        with open(path, "rb") as file:
            data = file.read() if self.max_bytes is None else file.read(self.max_bytes)
        return data or None
