"""Project metadata descriptor shared by app-setup and nginx-sites."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProjectMetadata(BaseModel):
    """Contents of ``metadata.json``.

    Ports stay strings end to end; numeric values in a hand-edited file are
    turned into their string form on load.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    domain: str = ""
    frontend_port: str = Field(alias="frontendPort")
    backend_port: str = Field(alias="backendPort")

    @field_validator("domain", mode="before")
    @classmethod
    def _none_domain(cls, value: object) -> object:
        return "" if value is None else value

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2) + "\n"
