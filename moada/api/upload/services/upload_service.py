"""Upload service: sends a file to the exchange service."""

import logging

import httpx

from moada import remote
from moada.api.files.dto.file import FileRecord
from moada.api.upload.dto.upload import SelectedFile, UploadResponse

logger = logging.getLogger("moada.api.upload")

UPLOAD_PATH = "/sendFile"
FILE_FIELD = "file"


async def send_file(client: httpx.AsyncClient, file: SelectedFile, email: str = "") -> FileRecord:
    """POST the file as multipart form data and return the stored record."""
    files = {FILE_FIELD: (file.filename, file.content, file.media_type)}
    data = {"email": email} if email else None

    response = await remote.send(client, "POST", UPLOAD_PATH, files=files, data=data)
    body = remote.parse_body(response, UploadResponse)

    logger.info(
        "Uploaded %s (%d bytes): %s",
        body.data.name,
        body.data.size,
        body.message or "no message",
    )
    return body.data
