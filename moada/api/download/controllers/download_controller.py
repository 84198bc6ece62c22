"""Download controller: validates a public id, fetches the file and delivers it."""

import mimetypes
from typing import BinaryIO

import httpx
from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from moada.api.download.dto.download import DeliveredFile
from moada.api.download.services import download_service
from moada.api.download.services.download_service import Delivery
from moada.api.responses import raise_for_failure
from moada.errors import DeliveryFailed, ExchangeError
from moada.identifiers import validate_public_id
from moada.lifecycle import Controller, InFlight, Succeeded
from moada.remote import get_client

router = APIRouter(prefix="/api", tags=["Download"])


class DownloadController(Controller):
    """Idle -> InFlight("validating") -> InFlight("fetching") -> Succeeded(DeliveredFile) | Failed.

    An invalid id fails during validation and never reaches the network.
    """

    def __init__(self, client: httpx.AsyncClient, deliver: Delivery, on_change=None):
        super().__init__(on_change)
        self.client = client
        self.deliver = deliver

    async def download(self, candidate_id: str) -> None:
        self._begin("validating")
        try:
            public_id = validate_public_id(candidate_id)
            self._transition(InFlight("fetching"))
            fetched = await download_service.fetch_file(self.client, public_id)
            self._hand_off(fetched.content, fetched.filename)
        except ExchangeError as e:
            self._fail(e)
        else:
            self._transition(Succeeded(DeliveredFile(fetched.filename, len(fetched.content))))

    def _hand_off(self, content: bytes, filename: str) -> None:
        with download_service.payload_handle(content) as handle:
            try:
                self.deliver(handle, filename)
            except Exception as e:
                raise DeliveryFailed(f"Could not save {filename}: {e}") from e


class AttachmentDelivery:
    """Turn a delivered payload into a "save as" response for the browser."""

    def __init__(self):
        self.response: Response | None = None

    def __call__(self, handle: BinaryIO, filename: str) -> None:
        media_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
        self.response = Response(
            content=handle.read(),
            media_type=media_type,
            headers={"Content-Disposition": download_service.content_disposition(filename)},
        )


@router.get("/download")
async def download_file(
    id_public: str = Query("", alias="idPublic"),
    client: httpx.AsyncClient = Depends(get_client),
):
    """Fetch a file by public id and send it to the browser as an attachment."""
    delivery = AttachmentDelivery()
    controller = DownloadController(client, delivery)
    await controller.download(id_public)
    raise_for_failure(controller.state)
    return delivery.response
