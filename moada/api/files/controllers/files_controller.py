"""Files controller: owner operations on a single file, addressed by private id."""

import httpx
from fastapi import APIRouter, Depends

from moada.api.files.dto.file import FileRecord, MessageResponse
from moada.api.files.services import files_service
from moada.api.responses import raise_for_failure
from moada.errors import ExchangeError
from moada.identifiers import validate_private_id
from moada.lifecycle import Controller, Succeeded
from moada.remote import get_client

router = APIRouter(prefix="/api/files", tags=["Files"])


class PrivateFileController(Controller):
    """Look up or delete one file by its private id.

    ``lookup`` settles on the FileRecord, ``delete`` on the service message.
    """

    def __init__(self, client: httpx.AsyncClient, on_change=None):
        super().__init__(on_change)
        self.client = client

    async def lookup(self, private_id: str) -> None:
        self._begin("looking_up")
        try:
            record = await files_service.get_file(self.client, validate_private_id(private_id))
        except ExchangeError as e:
            self._fail(e)
        else:
            self._transition(Succeeded(record))

    async def delete(self, private_id: str) -> None:
        self._begin("deleting")
        try:
            message = await files_service.delete_file(self.client, validate_private_id(private_id))
        except ExchangeError as e:
            self._fail(e)
        else:
            self._transition(Succeeded(message))


@router.get("/{id_private}", response_model=FileRecord)
async def get_file(id_private: str, client: httpx.AsyncClient = Depends(get_client)):
    controller = PrivateFileController(client)
    await controller.lookup(id_private)
    raise_for_failure(controller.state)
    return controller.state.value


@router.delete("/{id_private}", response_model=MessageResponse)
async def delete_file(id_private: str, client: httpx.AsyncClient = Depends(get_client)):
    controller = PrivateFileController(client)
    await controller.delete(id_private)
    raise_for_failure(controller.state)
    return MessageResponse(message=controller.state.value or "File deleted successfully")
