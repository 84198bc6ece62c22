"""Request lifecycle shared by the controllers.

A controller is always in exactly one of four states:

    Idle -> InFlight(step) -> Succeeded(value) | Failed(kind, detail)

``InFlight`` is the only state in which a loading indicator is shown and the
only state that refuses a new request.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Union

from moada.errors import ErrorKind, ExchangeError, PreconditionViolation

logger = logging.getLogger("moada.lifecycle")


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class InFlight:
    step: str


@dataclass(frozen=True)
class Succeeded:
    value: Any


@dataclass(frozen=True)
class Failed:
    kind: ErrorKind
    detail: str = ""


State = Union[Idle, InFlight, Succeeded, Failed]
IDLE = Idle()


class Controller:
    """Holds one lifecycle state and notifies an observer on every transition."""

    def __init__(self, on_change: Callable[[State], None] | None = None):
        self._state: State = IDLE
        self._on_change = on_change

    @property
    def state(self) -> State:
        return self._state

    @property
    def loading(self) -> bool:
        return isinstance(self._state, InFlight)

    def _transition(self, state: State) -> None:
        self._state = state
        logger.debug("%s -> %s", type(self).__name__, type(state).__name__)
        if self._on_change:
            self._on_change(state)

    def _begin(self, step: str) -> None:
        if self.loading:
            raise PreconditionViolation(
                f"{type(self).__name__} already has a request in flight"
            )
        self._transition(InFlight(step))

    def _fail(self, error: ExchangeError) -> None:
        logger.warning("%s failed (%s): %s", type(self).__name__, error.kind.value, error.message)
        self._transition(Failed(error.kind, error.message))
