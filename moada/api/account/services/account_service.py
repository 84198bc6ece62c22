"""Account service: usage information for the caller's origin identity."""

import logging

import httpx

from moada import remote
from moada.api.account.dto.account import AccountRecord
from moada.api.files.dto.file import MessageResponse

logger = logging.getLogger("moada.api.account")

ACCOUNT_PATH = "/myInfo"
ERASE_PATH = "/deleteUser"


async def fetch_account(client: httpx.AsyncClient) -> AccountRecord:
    # Origin identity is resolved by the service from the connection
    response = await remote.send(client, "GET", ACCOUNT_PATH)
    record = remote.parse_data(response, AccountRecord)
    for anomaly in record.anomalies:
        logger.warning("Account data anomaly: %s", anomaly)
    return record


async def erase_account(client: httpx.AsyncClient) -> str:
    """Ask the service to erase every file and record tied to the caller."""
    response = await remote.send(client, "POST", ERASE_PATH)
    return remote.parse_body(response, MessageResponse).message
