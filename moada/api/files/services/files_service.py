"""Files service: owner operations addressed by private id."""

import logging

import httpx

from moada import remote
from moada.api.files.dto.file import FileRecord, MessageResponse

logger = logging.getLogger("moada.api.files")

FILE_INFO_PATH = "/fileInfo"
DELETE_PATH = "/deleteFile"


async def get_file(client: httpx.AsyncClient, private_id: str) -> FileRecord:
    response = await remote.send(client, "GET", FILE_INFO_PATH, params={"idPrivate": private_id})
    return remote.parse_data(response, FileRecord)


async def delete_file(client: httpx.AsyncClient, private_id: str) -> str:
    response = await remote.send(client, "POST", DELETE_PATH, data={"idPrivate": private_id})
    message = remote.parse_body(response, MessageResponse).message
    logger.info("File deleted: %s", message or "no message")
    return message
