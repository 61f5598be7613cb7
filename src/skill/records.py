from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class InputData(BaseModel):
    text: str = ""
    language: str | None = None


class InputRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    record_id: str = Field(alias="recordId")
    data: InputData


class OutputData(BaseModel):
    text: str


class OutputRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    record_id: str = Field(alias="recordId")
    data: OutputData
    errors: list[str] | None = None
    warnings: list[str] | None = None


class EnrichmentResponse(BaseModel):
    values: list[OutputRecord] = Field(default_factory=list)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
