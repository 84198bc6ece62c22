"""File Data Transfer Objects."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from moada.dates import Instant
from moada.identifiers import PUBLIC_ID_PATTERN


class FileRecord(BaseModel):
    """A stored file as the exchange service describes it.

    Attribute names are Pythonic; the wire names (``idPublic``, ``savedDate``...)
    are kept as aliases and used whenever the record is serialized.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    public_id: str = Field(alias="idPublic", pattern=f"^{PUBLIC_ID_PATTERN.pattern}$")
    private_id: str = Field(alias="idPrivate")
    name: str
    size: int = Field(ge=0)
    saved_date: Instant = Field(alias="savedDate")
    expire_date: Instant = Field(alias="expireDate")
    email: str = ""

    @model_validator(mode="after")
    def _expires_after_saving(self):
        if self.expire_date <= self.saved_date:
            raise ValueError("expireDate must be after savedDate")
        return self


class MessageResponse(BaseModel):
    message: str = ""
