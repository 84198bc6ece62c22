import pytest

from moada.errors import ErrorKind, InvalidIdentifier
from moada.identifiers import is_valid_public_id, validate_private_id, validate_public_id


@pytest.mark.parametrize(
    "candidate",
    [
        "a" * 64,
        "0123456789abcdef" * 4,
        "0123456789ABCDEF" * 4,
        "aBcDeF0123456789" * 4,
    ],
)
def test_accepts_64_hex_characters(candidate):
    assert validate_public_id(candidate) == candidate
    assert is_valid_public_id(candidate)


@pytest.mark.parametrize(
    "candidate",
    [
        "",
        "zz",
        "a" * 63,
        "a" * 65,
        "g" + "a" * 63,
        " " + "a" * 64,
        "a" * 64 + " ",
        "a" * 64 + "\n",
        "a" * 32 + "-" + "a" * 31,
        None,
        12345,
    ],
)
def test_rejects_everything_else(candidate):
    assert not is_valid_public_id(candidate)
    with pytest.raises(InvalidIdentifier) as exc:
        validate_public_id(candidate)
    assert exc.value.kind is ErrorKind.INVALID_IDENTIFIER


def test_case_is_preserved():
    mixed = "AbCdEf" + "0" * 58
    assert validate_public_id(mixed) == mixed


def test_private_id_must_not_be_blank():
    assert validate_private_id("priv123") == "priv123"
    for candidate in ("", "   ", " priv123", None):
        with pytest.raises(InvalidIdentifier):
            validate_private_id(candidate)
