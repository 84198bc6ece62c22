"""Upload controller: submits a selected file and holds the resulting record."""

import httpx
from fastapi import APIRouter, Depends, File, Form, UploadFile

from moada.api.files.dto.file import FileRecord
from moada.api.responses import from_exception, raise_for_failure
from moada.api.upload.dto.upload import SelectedFile
from moada.api.upload.services import upload_service
from moada.errors import ExchangeError, PreconditionViolation
from moada.lifecycle import Controller, Succeeded
from moada.remote import get_client

router = APIRouter(prefix="/api", tags=["Upload"])


class UploadController(Controller):
    """Idle -> InFlight("submitting") -> Succeeded(FileRecord) | Failed."""

    def __init__(self, client: httpx.AsyncClient, on_change=None):
        super().__init__(on_change)
        self.client = client

    async def submit(self, file: SelectedFile | None, email: str = "") -> None:
        if file is None or not file.filename or file.content is None:
            raise PreconditionViolation("Please, select a file before submitting.")

        self._begin("submitting")
        try:
            record = await upload_service.send_file(self.client, file, email=email)
        except ExchangeError as e:
            self._fail(e)
        else:
            self._transition(Succeeded(record))


async def selected_file(upload: UploadFile | None) -> SelectedFile | None:
    """Convert a form upload; browsers send an empty part when nothing was picked."""
    if upload is None or not upload.filename:
        return None
    return SelectedFile(
        filename=upload.filename,
        content=await upload.read(),
        content_type=upload.content_type,
    )


@router.post("/upload", response_model=FileRecord)
async def upload_file(
    file: UploadFile | None = File(None),
    email: str = Form(""),
    client: httpx.AsyncClient = Depends(get_client),
):
    """Forward a multipart upload to the exchange service."""
    controller = UploadController(client)
    try:
        await controller.submit(await selected_file(file), email=email)
    except PreconditionViolation as e:
        raise from_exception(e)
    raise_for_failure(controller.state)
    return controller.state.value
