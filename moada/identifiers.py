"""Syntax checks for file identifiers, run before any request leaves the client."""

import re

from moada.errors import InvalidIdentifier

PUBLIC_ID_LENGTH = 64
PUBLIC_ID_PATTERN = re.compile(r"[0-9a-fA-F]{64}")


def is_valid_public_id(candidate) -> bool:
    return isinstance(candidate, str) and PUBLIC_ID_PATTERN.fullmatch(candidate) is not None


def validate_public_id(candidate) -> str:
    """Return the candidate unchanged if it is a 64-character hex string.

    Case is preserved; surrounding whitespace is not stripped but rejected.
    """
    if not is_valid_public_id(candidate):
        raise InvalidIdentifier(
            f"Invalid ID format: a public id is {PUBLIC_ID_LENGTH} hexadecimal characters."
        )
    return candidate


def validate_private_id(candidate) -> str:
    """Private ids are opaque; only blank or padded values are refused."""
    if not isinstance(candidate, str) or not candidate or candidate != candidate.strip():
        raise InvalidIdentifier("The provided private id is not valid.")
    return candidate
