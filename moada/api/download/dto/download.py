"""Download Data Transfer Objects."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FetchedFile:
    """Payload read from the service, before delivery."""

    filename: str
    content: bytes


@dataclass(frozen=True)
class DeliveredFile:
    filename: str
    size: int
