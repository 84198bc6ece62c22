"""Upload Data Transfer Objects."""

import mimetypes
from dataclasses import dataclass

from pydantic import BaseModel

from moada.api.files.dto.file import FileRecord


@dataclass(frozen=True)
class SelectedFile:
    """A file the user picked for upload."""

    filename: str
    content: bytes
    content_type: str | None = None

    @property
    def media_type(self) -> str:
        if self.content_type:
            return self.content_type
        guessed, _ = mimetypes.guess_type(self.filename)
        return guessed or "application/octet-stream"


class UploadResponse(BaseModel):
    message: str = ""
    data: FileRecord
