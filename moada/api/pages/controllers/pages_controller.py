"""Pages controller: HTML routes for the web UI."""

from pathlib import Path

import httpx
from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from moada.api.account.controllers.account_controller import AccountInfoController
from moada.api.download.controllers.download_controller import (
    AttachmentDelivery,
    DownloadController,
)
from moada.api.upload.controllers.upload_controller import UploadController, selected_file
from moada.dates import format_date
from moada.errors import HTTP_STATUS, PreconditionViolation
from moada.lifecycle import Failed
from moada.remote import get_client

router = APIRouter(tags=["Pages"])

TEMPLATES_DIR = Path(__file__).parent.parent.parent.parent / "templates"
templates = Jinja2Templates(directory=TEMPLATES_DIR)


def _filesize(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024**2:
        return f"{size / 1024:.1f} KB"
    if size < 1024**3:
        return f"{size / 1024**2:.1f} MB"
    return f"{size / 1024**3:.1f} GB"


templates.env.filters["formatdate"] = format_date
templates.env.filters["filesize"] = _filesize


def _status(state) -> int:
    return HTTP_STATUS[state.kind] if isinstance(state, Failed) else 200


@router.get("/", response_class=HTMLResponse)
async def home(request: Request):
    return templates.TemplateResponse(request, "home.html", {"state": None, "notice": None})


@router.post("/", response_class=HTMLResponse)
async def home_submit(
    request: Request,
    file: UploadFile | None = File(None),
    email: str = Form(""),
    client: httpx.AsyncClient = Depends(get_client),
):
    controller = UploadController(client)
    try:
        await controller.submit(await selected_file(file), email=email)
    except PreconditionViolation as e:
        return templates.TemplateResponse(
            request,
            "home.html",
            {"state": None, "notice": e.message},
            status_code=HTTP_STATUS[e.kind],
        )
    return templates.TemplateResponse(
        request,
        "home.html",
        {"state": controller.state, "notice": None},
        status_code=_status(controller.state),
    )


@router.get("/download", response_class=HTMLResponse)
async def download_page(request: Request):
    return templates.TemplateResponse(request, "download.html", {"state": None})


@router.post("/download")
async def download_submit(
    request: Request,
    id_public: str = Form("", alias="idPublic"),
    client: httpx.AsyncClient = Depends(get_client),
):
    delivery = AttachmentDelivery()
    controller = DownloadController(client, delivery)
    await controller.download(id_public)
    if isinstance(controller.state, Failed):
        return templates.TemplateResponse(
            request,
            "download.html",
            {"state": controller.state},
            status_code=_status(controller.state),
        )
    return delivery.response


@router.get("/account", response_class=HTMLResponse)
async def account_page(request: Request, client: httpx.AsyncClient = Depends(get_client)):
    """Loads the caller's usage data every time the page is shown."""
    controller = AccountInfoController(client)
    await controller.refresh()
    return templates.TemplateResponse(
        request,
        "account.html",
        {"state": controller.state},
        status_code=_status(controller.state),
    )
