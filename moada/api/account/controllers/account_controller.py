"""Account controller: usage information for the caller's origin identity."""

import httpx
from fastapi import APIRouter, Depends

from moada.api.account.dto.account import AccountRecord
from moada.api.account.services import account_service
from moada.api.files.dto.file import MessageResponse
from moada.api.responses import raise_for_failure
from moada.errors import ExchangeError
from moada.lifecycle import IDLE, Controller, Succeeded
from moada.remote import get_client

router = APIRouter(prefix="/api/me", tags=["Account"])


class AccountInfoController(Controller):
    """Idle -> InFlight("loading") -> Succeeded(AccountRecord) | Failed.

    The record is shown exactly as the service sent it, anomalies included.
    A failed refresh stays failed until ``refresh`` is called again.
    """

    def __init__(self, client: httpx.AsyncClient, on_change=None):
        super().__init__(on_change)
        self.client = client

    async def refresh(self) -> None:
        self._begin("loading")
        try:
            record = await account_service.fetch_account(self.client)
        except ExchangeError as e:
            self._fail(e)
        else:
            self._transition(Succeeded(record))

    async def erase(self) -> None:
        """Erase the caller's data on the service; success drops any held record."""
        self._begin("erasing")
        try:
            await account_service.erase_account(self.client)
        except ExchangeError as e:
            self._fail(e)
        else:
            self._transition(IDLE)


@router.get("", response_model=AccountRecord)
async def my_info(client: httpx.AsyncClient = Depends(get_client)):
    controller = AccountInfoController(client)
    await controller.refresh()
    raise_for_failure(controller.state)
    return controller.state.value


@router.delete("", response_model=MessageResponse)
async def erase_my_data(client: httpx.AsyncClient = Depends(get_client)):
    controller = AccountInfoController(client)
    await controller.erase()
    raise_for_failure(controller.state)
    return MessageResponse(message="All of your data has been erased")
