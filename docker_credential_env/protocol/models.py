from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    """Credential payload exchanged with the Docker CLI.

    Field names on the wire are `ServerURL`, `Username` and `Secret`; absent
    fields decode as empty strings.
    """

    model_config = ConfigDict(populate_by_name=True)

    server_url: str = Field("", alias="ServerURL")
    username: str = Field("", alias="Username")
    secret: str = Field("", alias="Secret")

    def to_wire(self) -> str:
        return self.model_dump_json(by_alias=True)
