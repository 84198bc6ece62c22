"""Account Data Transfer Objects."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from moada.dates import Instant


class AccountRecord(BaseModel):
    """Usage snapshot for the caller's origin identity.

    The service serializes Go field names verbatim, hence the aliases.
    Inconsistent values are kept as received and listed by ``anomalies``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    origin_address: str = Field(alias="Ip")
    file_identifiers: list[str] = Field(default_factory=list, alias="Files")
    file_count: int = Field(ge=0, alias="FilesNumber")
    used_space_bytes: int = Field(ge=0, alias="UsedSpace")
    origin_saved_date: Instant = Field(alias="IpSavedDate")
    origin_expire_date: Instant = Field(alias="IpExpireDate")
    api_call_count: int = Field(ge=0, alias="APICalls")
    last_api_call_date: Instant = Field(alias="APILastCallDate")

    @field_validator("file_identifiers", mode="before")
    @classmethod
    def _null_is_empty(cls, value):
        # A Go nil slice is encoded as null
        return [] if value is None else value

    @property
    def anomalies(self) -> list[str]:
        found = []
        if self.file_count != len(self.file_identifiers):
            found.append(
                f"FilesNumber is {self.file_count} but {len(self.file_identifiers)} file id(s) were listed"
            )
        if self.origin_expire_date <= self.origin_saved_date:
            found.append("IpExpireDate is not after IpSavedDate")
        if self.last_api_call_date < self.origin_saved_date:
            found.append("APILastCallDate is before IpSavedDate")
        return found
