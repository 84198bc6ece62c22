"""MOADA: web application entry point."""

import logging

from fastapi import FastAPI

from moada import __version__
from moada.api.account.controllers.account_controller import router as account_router
from moada.api.download.controllers.download_controller import router as download_router
from moada.api.files.controllers.files_controller import router as files_router
from moada.api.pages.controllers.pages_controller import router as pages_router
from moada.api.upload.controllers.upload_controller import router as upload_router
from moada.config import EXCHANGE_API_URL, LOG_FORMAT, LOG_LEVEL

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
# httpx logs full request URLs, private ids included
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger("moada.main")

app = FastAPI(title="MOADA", version=__version__)

logger.info("Forwarding requests to exchange service at %s", EXCHANGE_API_URL)


@app.get("/api/health")
async def health():
    return {"status": "ok"}


# API routers (prefixed)
app.include_router(upload_router)
app.include_router(download_router)
app.include_router(account_router)
app.include_router(files_router)

# Pages
app.include_router(pages_router)
