"""Remote exchange service: HTTP client construction and response handling."""

import logging

import httpx
from pydantic import BaseModel, ValidationError

from moada.config import EXCHANGE_API_URL, REQUEST_TIMEOUT
from moada.errors import MalformedResponse, NetworkError, ServerRejected

logger = logging.getLogger("moada.remote")


def create_client(
    base_url: str = EXCHANGE_API_URL,
    timeout: float = REQUEST_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)


async def get_client():
    client = create_client()
    try:
        yield client
    finally:
        await client.aclose()


def _error_text(response: httpx.Response) -> str:
    """Pull the service's error text out of a rejected response, if any."""
    try:
        body = response.json()
    except ValueError:
        return response.text.strip()
    if isinstance(body, dict):
        # The service answers with either key
        for key in ("error", "erro"):
            if body.get(key):
                return str(body[key])
    return ""


async def send(client: httpx.AsyncClient, method: str, path: str, **kwargs) -> httpx.Response:
    """Issue exactly one request; transport and status failures become typed errors."""
    logger.info("%s %s", method, path)
    try:
        response = await client.request(method, path, **kwargs)
    except httpx.DecodingError as e:
        raise MalformedResponse(f"The exchange service sent an undecodable body: {e}") from e
    except httpx.RequestError as e:
        raise NetworkError(f"Could not reach the exchange service: {e}") from e

    if not response.is_success:
        detail = _error_text(response) or response.reason_phrase
        raise ServerRejected(
            f"The exchange service answered {response.status_code}: {detail}",
            status_code=response.status_code,
        )
    return response


def read_json(response: httpx.Response) -> dict:
    try:
        body = response.json()
    except ValueError as e:
        raise MalformedResponse("The exchange service returned a body that is not JSON") from e
    if not isinstance(body, dict):
        raise MalformedResponse("The exchange service returned an unexpected body")
    return body


def parse_body(response: httpx.Response, model: type[BaseModel]) -> BaseModel:
    """Validate a whole JSON body against ``model``."""
    try:
        return model.model_validate(read_json(response))
    except ValidationError as e:
        raise MalformedResponse(f"Unexpected response shape: {e.error_count()} invalid field(s)") from e


def parse_data(response: httpx.Response, model: type[BaseModel]) -> BaseModel:
    """Validate the ``data`` object of a ``{"data": ...}`` envelope."""
    body = read_json(response)
    if not isinstance(body.get("data"), dict):
        raise MalformedResponse("The exchange service response has no data object")
    try:
        return model.model_validate(body["data"])
    except ValidationError as e:
        raise MalformedResponse(f"Unexpected response shape: {e.error_count()} invalid field(s)") from e
