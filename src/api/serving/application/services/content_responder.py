"""Turns a resolved file path into a response."""

from __future__ import annotations

import mimetypes
from pathlib import Path

from serving.domain.value_objects import FALLBACK_CONTENT_TYPE, StaticResponse
from serving.ports.filesystem import IFileSystem


def guess_content_type(path: Path) -> str:
    """Infer a media type from the file extension."""
    content_type, _ = mimetypes.guess_type(path.name)
    return content_type or FALLBACK_CONTENT_TYPE


class ContentResponder:
    """Reads the resolved file and wraps it in a 200 response.

    A file that cannot be read (missing, a directory, permission denied,
    any I/O error) still yields 200, with an empty body and no
    Content-Type header. Callers cannot tell a missing file from an empty
    one by status code.
    """

    def __init__(self, file_system: IFileSystem):
        self._file_system = file_system

    async def respond(self, path: Path) -> StaticResponse:
        content = await self._file_system.read_bytes(path)
        if content is None:
            return StaticResponse.empty()

        return StaticResponse(
            status_code=200,
            headers=(("Content-Type", guess_content_type(path)),),
            body=content,
        )
