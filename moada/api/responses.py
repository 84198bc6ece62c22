"""Translate settled controller failures into HTTP errors for the JSON API."""

from fastapi import HTTPException

from moada.errors import HTTP_STATUS, ErrorKind, ExchangeError
from moada.lifecycle import Failed, State


def http_error(kind: ErrorKind, message: str) -> HTTPException:
    return HTTPException(
        status_code=HTTP_STATUS[kind],
        detail={"kind": kind.value, "message": message},
    )


def from_exception(error: ExchangeError) -> HTTPException:
    return http_error(error.kind, error.message)


def raise_for_failure(state: State) -> None:
    if isinstance(state, Failed):
        raise http_error(state.kind, state.detail)
